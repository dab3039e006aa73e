"""Console front end for the task board.

Redraws the board after every command. Voice dictation is driven by typing
(or piping) the recognised transcript after ``voice``; the transcript is
shown for confirmation before anything is sent.
"""
from client.board import TaskBoard
from client.render import CATEGORY_ICONS, render_board
from client.voice import MAX_CHARACTERS, VoiceDictation

CATEGORIES = tuple(CATEGORY_ICONS)

HELP = f"""Commands:
  add <title> [@work|@personal|@urgent]   create a task
  voice <transcript>                      dictate a task (max {MAX_CHARACTERS} chars, confirmed before sending)
  toggle <id>                             flip completion
  delete <id>                             remove a task
  refresh                                 reload from the server
  help                                    show this text
  exit                                    quit"""


def split_category(text: str) -> tuple[str, str | None]:
    """``"Buy milk @personal"`` -> ``("Buy milk", "personal")``."""
    head, _, last = text.rstrip().rpartition(" ")
    if head and last.startswith("@") and last[1:] in CATEGORIES:
        return head, last[1:]
    return text, None


class CLI:
    def __init__(self, board: TaskBoard, input_fn=input, output_fn=print) -> None:
        self.board = board
        self.voice = VoiceDictation(on_confirm=self.board.add)
        self._input = input_fn
        self._print = output_fn

    def draw(self) -> None:
        self._print("Task Manager")
        for line in render_board(self.board.tasks, self.board.loading, self.board.error):
            self._print(line)

    def run(self) -> None:
        self.board.load()
        try:
            while True:
                self.draw()
                line = self._input("\n: ").strip()
                if not line:
                    continue
                if line.lower() == "exit":
                    break
                self.handle(line)
        except (KeyboardInterrupt, EOFError):
            pass
        self._print("Goodbye.")

    def handle(self, line: str) -> None:
        command, _, arg = line.partition(" ")
        command = command.lower()
        arg = arg.strip()

        if command == "help":
            self._print(HELP)
        elif command == "refresh":
            self.board.load()
        elif command == "add":
            title, category = split_category(arg)
            self.board.draft = title
            self.board.submit_draft(category=category)
        elif command == "voice":
            self._dictate(arg)
        elif command in ("toggle", "delete"):
            task_id = self._parse_id(arg)
            if task_id is None:
                return
            if command == "toggle":
                self.board.toggle(task_id)
            else:
                self.board.delete(task_id)
        else:
            self._print(f"Unknown command: {command} (type 'help')")

    def _dictate(self, transcript: str) -> None:
        problem = self.voice.start_listening()
        if problem:
            self._print(problem)
            return
        if not transcript:
            self._print(self.voice.fail("no-speech"))
            return
        text = self.voice.receive_transcript(transcript)
        self._print(f'Confirm Task: "{text}" ({self.voice.character_count})')
        answer = self._input("Create task? [y/N] ").strip().lower()
        if answer in ("y", "yes"):
            self.voice.confirm()
        else:
            self.voice.cancel()

    def _parse_id(self, arg: str) -> int | None:
        try:
            return int(arg)
        except ValueError:
            self._print(f"Invalid task id: {arg!r}")
            return None

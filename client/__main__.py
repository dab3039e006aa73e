from dotenv import load_dotenv

from client.api import TaskApiClient
from client.board import TaskBoard
from client.cli import CLI
from core.logging_config import configure_logging


def main() -> None:
    load_dotenv()
    configure_logging("WARNING")
    with TaskApiClient() as api:
        CLI(TaskBoard(api)).run()


if __name__ == "__main__":
    main()

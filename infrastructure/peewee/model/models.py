from peewee import BooleanField, CharField, DateTimeField, IntegerField, Model

from infrastructure.peewee.session.db import db


class TaskModel(Model):
    id = IntegerField(primary_key=True)
    title = CharField()
    completed = BooleanField(default=False)
    category = CharField()
    created_at = DateTimeField()

    class Meta:
        database = db
        table_name = "tasks"


class TaskSequenceModel(Model):
    name = CharField(primary_key=True)
    value = IntegerField()

    class Meta:
        database = db
        table_name = "task_sequences"

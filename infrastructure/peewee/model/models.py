from peewee import CharField, DateTimeField, Model, TextField

from infrastructure.peewee.session.db import db


class TodoModel(Model):
    id = CharField(primary_key=True, max_length=24)
    task = TextField()
    due_date = DateTimeField(index=True)
    status = CharField(max_length=16)
    created_at = DateTimeField()
    updated_at = DateTimeField()

    class Meta:
        database = db
        table_name = "todos"

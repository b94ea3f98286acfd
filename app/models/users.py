# app/models/users.py

from pydantic import BaseModel


class UserRecord(BaseModel):
    """
    A fixture user. `password` is plaintext and is hashed before it reaches the database.
    """

    id: str
    name: str
    email: str
    password: str

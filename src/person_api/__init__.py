"""Person registry HTTP service.

Create, read, update, delete and filtered search over Person records, served
by FastAPI and stored through SQLModel.
"""

__version__ = "0.1.0"

from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine
from config import DATABASE_URL
import database.models #noqa: F401, registers the table models on SQLModel.metadata

def make_engine(database_url: str):
    if database_url.startswith("sqlite"):
        connect_args = {"check_same_thread": False} #FastAPI serves sync endpoints from a threadpool
        if database_url in ("sqlite://", "sqlite:///:memory:"): #in-memory SQLite lives in one connection, share it
            return create_engine(database_url, connect_args=connect_args, poolclass=StaticPool)
        return create_engine(database_url, connect_args=connect_args)
    return create_engine(database_url)

engine = make_engine(DATABASE_URL) #SQLAlchemy Engine allows for database interaction, no connection is opened until first use

def create_database_tables(target_engine=None):
    SQLModel.metadata.create_all(target_engine or engine) #creates SQLModel defined tables (that dont already exist)

import logging
from fastapi import FastAPI
from config import LOG_LEVEL, STORE_BACKEND
from database.database import create_database_tables
from endpoints import auth, clients, navigation, notifications, payments, tasks
from enums import StoreBackendEnum

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

if STORE_BACKEND == StoreBackendEnum.sql:
    create_database_tables() #only the sql backend needs tables, the memory backend keeps everything in process

app = FastAPI( #creates new FastAPI app instance
    title="Anthem Dashboard: Clients, Tasks and Payments", #title shown in docs
)

app.include_router(auth.router) #include routers from endpoints
app.include_router(clients.router)
app.include_router(tasks.router)
app.include_router(payments.router)
app.include_router(notifications.router)
app.include_router(navigation.router)

@app.get("/")
def hello_dashboard():
    return {"Hello": "Anthem Dashboard"}

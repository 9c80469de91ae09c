import logging
from constants import ACCOUNT_CREATED_MESSAGE, CREDENTIALS_RESENT_MESSAGE
from database.models import Client
from logic.store import EntityStore

logger = logging.getLogger(__name__)

#client portal accounts. Sending the credentials email is out of scope, only the flag on the client changes

def create_account(clients: EntityStore[Client], client_id: str) -> tuple[Client, str]:
    client = clients.get(client_id)
    if not client.has_account:
        client = clients.update(client_id, {"has_account": True})
        logger.info("Portal account created for client %s", client_id)
    return client, ACCOUNT_CREATED_MESSAGE.format(email=client.email)

def resend_credentials(clients: EntityStore[Client], client_id: str) -> str:
    client = clients.get(client_id)
    if not client.has_account:
        raise ValueError(f"Client {client.name} has no account yet")
    logger.info("Credentials resent for client %s", client_id)
    return CREDENTIALS_RESENT_MESSAGE.format(email=client.email)

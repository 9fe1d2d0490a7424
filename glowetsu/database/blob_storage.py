from azure.storage.blob.aio import BlobServiceClient
from azure.core.exceptions import ResourceExistsError


from glowetsu.core.config import settings


_blob_service_client: BlobServiceClient | None = None


def get_blob_service_client() -> BlobServiceClient:
    """
    Initializes on first use and returns the Azure Blob Service client.

    Args:
        None

    Returns:
        BlobServiceClient: The Azure Blob Service client.
    """
    global _blob_service_client
    if _blob_service_client is None:
        _blob_service_client = BlobServiceClient.from_connection_string(
            settings.AZURE_STORAGE_CONNECTION_STRING
        )
    return _blob_service_client


async def close_blob_service_client():
    """
    Closes the Azure Blob Service client connection.

    Args:
        None

    Returns:
        None
    """
    global _blob_service_client
    if _blob_service_client is not None:
        await _blob_service_client.close()
        _blob_service_client = None


async def verify_containers() -> None:
    """
    Ensure the content image container exists, creates it if missing.

    Args:
        None

    Returns:
        None
    """
    name = settings.CONTENT_CONTAINER_NAME
    container_client = get_blob_service_client().get_container_client(name)
    try:
        await container_client.create_container(public_access="blob")

    except ResourceExistsError:
        return

    except Exception as exc:
        raise RuntimeError(
            f"Failed to ensure Azure Blob container '{name}'. "
            f"Application startup aborted."
        ) from exc

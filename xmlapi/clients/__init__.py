from django.conf import settings
from django.utils.module_loading import import_string


def get_client(**kwargs):
    """Instantiate the client class named by ``XMLAPI_CLIENT_CLASS``."""
    client_class = import_string(
        getattr(settings, 'XMLAPI_CLIENT_CLASS', 'xmlapi.clients.xml_client.XmlApiClient')
    )
    return client_class(**kwargs)

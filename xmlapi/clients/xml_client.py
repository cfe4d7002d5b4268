import logging

import requests
from django.conf import settings

from xmlapi.exceptions import HTTPStatusError, UnauthorizedError
from xmlapi.session import Session
from xmlapi.transforms import (
    decode_file_list,
    decode_json,
    decode_node,
    encode_body,
    encode_params,
    envelope_result,
)
from xmlapi.transport import AUTHORIZE_ENDPOINT, send_once

from .base import BaseClient

logger = logging.getLogger(__name__)

XMLAPI_BASE_URL = getattr(settings, 'XMLAPI_BASE_URL', 'http://localhost:8080')
XMLAPI_API_KEY = getattr(settings, 'XMLAPI_API_KEY', 'xmlapi-dev-key')
XMLAPI_TIMEOUT = getattr(settings, 'XMLAPI_TIMEOUT', 30.0)

UNAUTHORIZED = 401


class XmlApiClient(BaseClient):
    def __init__(self, api_key=None, base_url=None, timeout=None):
        self.session = Session(
            api_key=api_key if api_key is not None else XMLAPI_API_KEY,
            base_url=base_url or XMLAPI_BASE_URL,
            http=self.make_session(),
            timeout=timeout if timeout is not None else XMLAPI_TIMEOUT,
        )

    def make_session(self) -> requests.Session:
        return requests.Session()

    def request(self, method, endpoint, params=None, body=None, timeout=None) -> bytes:
        data = encode_body(body)
        params = encode_params(params)

        response = send_once(self.session, method, endpoint, params=params, data=data, timeout=timeout)

        if response.status_code == UNAUTHORIZED and endpoint != AUTHORIZE_ENDPOINT:
            logger.warning("%s %s unauthorized, reauthorizing and retrying once", method, endpoint)
            self.session.refresh(response.credential, timeout=timeout)
            response = send_once(self.session, method, endpoint, params=params, data=data, timeout=timeout)

        if response.status_code == UNAUTHORIZED:
            raise UnauthorizedError(response.status_code, detail=response.text)
        if response.status_code >= 400:
            raise HTTPStatusError(response.status_code, detail=response.text)
        return response.content

    def authorize(self, timeout=None):
        return self.session.authorize(timeout=timeout)

    def copy_device(self, device_id, new_device_id, filename='', overwrite=False):
        """Copy a device's files to another device.

        An empty ``filename`` copies every file, otherwise only that one.
        """
        params = {
            'deviceid': device_id,
            'new_deviceid': new_device_id,
            'filename': filename,
            'overwrite': overwrite,
        }
        return envelope_result(decode_json(self.request('POST', '/copyDevice', params)))

    def create_file(self, device_id, filename, root_name):
        params = {
            'deviceid': device_id,
            'filename': filename,
            'rootname': root_name,
        }
        return envelope_result(decode_json(self.request('POST', '/createFile', params)))

    def create_node(self, device_id, filename, parent_path, tag, value):
        params = {
            'deviceid': device_id,
            'filename': filename,
            'parent_path': parent_path,
            'tag': tag,
            'value': value,
        }
        return envelope_result(decode_json(self.request('POST', '/create', params)))

    def delete_node(self, device_id, filename, path):
        params = {
            'deviceid': device_id,
            'filename': filename,
            'path': path,
        }
        return envelope_result(decode_json(self.request('DELETE', '/delete', params)))

    def delete_file(self, device_id, filename):
        params = {
            'deviceid': device_id,
            'filename': filename,
        }
        return envelope_result(decode_json(self.request('DELETE', '/deleteFile', params)))

    def list_files(self, device_id):
        params = {'deviceid': device_id}
        return decode_file_list(decode_json(self.request('GET', '/listFile', params)))

    def read_node(self, device_id, filename, path):
        params = {
            'deviceid': device_id,
            'filename': filename,
            'path': path,
        }
        return decode_node(decode_json(self.request('GET', '/read', params)))

    def update_node(self, device_id, filename, path, value):
        params = {
            'deviceid': device_id,
            'filename': filename,
            'path': path,
            'value': value,
        }
        return envelope_result(decode_json(self.request('PUT', '/update', params)))

import json

from xmlapi.exceptions import DecodeError, OperationError, SerializationError
from xmlapi.models import AuthToken, Envelope, Node, QName

NAME_KEYS = ('name', 'xmlname', 'XMLName')


def encode_value(value):
    if value is None:
        return ''
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return str(value)


def encode_params(params):
    return {key: encode_value(value) for key, value in (params or {}).items()}


def encode_body(body):
    if body is None:
        return None
    try:
        return json.dumps(body, ensure_ascii=False).encode('utf-8')
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"cannot encode request body: {exc}") from exc


def decode_json(content):
    try:
        return json.loads(content)
    except (TypeError, ValueError) as exc:
        raise DecodeError(f"invalid JSON in response: {exc}") from exc


def decode_auth_token(data):
    """Returns the AuthToken, or None when the payload has no usable token."""
    if not isinstance(data, dict):
        raise DecodeError(f"expected an object from /authorize, got {type(data).__name__}")
    token = data.get('token')
    if not token or not isinstance(token, str):
        return None
    expires = data.get('expires')
    return AuthToken(token=token, expires=None if expires is None else str(expires))


def decode_envelope(data):
    if not isinstance(data, dict):
        raise DecodeError(f"expected a status envelope, got {type(data).__name__}")
    status = data.get('status') or data.get('data') or ''
    error = data.get('error') or ''
    return Envelope(status=encode_value(status), error=str(error))


def envelope_result(data):
    """Unwraps a status envelope, raising OperationError when it carries an error."""
    envelope = decode_envelope(data)
    if envelope.error:
        raise OperationError(envelope.error)
    return envelope.status


def decode_qname(raw):
    if isinstance(raw, str):
        return QName(local=raw)
    if isinstance(raw, dict):
        local = raw.get('Local', raw.get('local', ''))
        space = raw.get('Space', raw.get('space', ''))
        if isinstance(local, str) and isinstance(space, str):
            return QName(local=local, space=space)
    raise DecodeError(f"unsupported node name: {raw!r}")


def decode_node(data):
    if not isinstance(data, dict):
        raise DecodeError(f"expected a node object, got {type(data).__name__}")

    raw_name = next((data[key] for key in NAME_KEYS if key in data), None)
    if raw_name is None:
        error = data.get('error')
        if error:
            raise OperationError(str(error))
        raise DecodeError("node has no name")

    children = data.get('nodes') or []
    if not isinstance(children, list):
        raise DecodeError("node children must be a list")

    value = data.get('value')
    return Node(
        name=decode_qname(raw_name),
        value='' if value is None else str(value),
        nodes=[decode_node(child) for child in children],
    )


def decode_file_list(data):
    if isinstance(data, dict):
        if data.get('error'):
            raise OperationError(str(data['error']))
        for key in ('files', 'data', 'status'):
            if isinstance(data.get(key), list):
                data = data[key]
                break
            if key != 'files' and isinstance(data.get(key), str):
                return [data[key]] if data[key] else []
        else:
            if 'files' in data and data['files'] is None:
                return []
            raise DecodeError("file listing has no files")

    if not isinstance(data, list) or not all(isinstance(name, str) for name in data):
        raise DecodeError("file listing must be a list of names")
    return list(data)

"""
Host side of the plugin boundary.

The host hands over a UTF-8 encoded JSON request and gets back a handle
to a JSON encoded response kept alive in a `BufferRegistry` until the
host releases it.
"""
import json
import threading

from contextlib import contextmanager
from itertools import count
from typing import Any, Dict, Iterator, Tuple

from .color_scheme import ColorScheme
from .consts import DEFAULT_COLOR_COUNT
from .errors import BracketColorizerError
from .errors import TransportError
from .executor import BracketMatcher
from .logger import Logger
from .model import Language


def pack(handle: int, length: int) -> int:
    return (handle << 32) | length


def unpack(packed: int) -> Tuple[int, int]:
    return packed >> 32, packed & 0xffffffff


class BufferRegistry:
    def __init__(self):
        self._lock = threading.Lock()
        self._buffers: Dict[int, bytes] = {}
        self._handles = count(1)

    def __len__(self):
        with self._lock:
            return len(self._buffers)

    def __contains__(self, handle: int):
        with self._lock:
            return handle in self._buffers

    def store(self, data: bytes) -> int:
        with self._lock:
            handle = next(self._handles)
            self._buffers[handle] = bytes(data)
        return handle

    def read(self, handle: int) -> bytes:
        with self._lock:
            return self._buffers[handle]

    def release(self, handle: int) -> None:
        with self._lock:
            data = self._buffers.pop(handle, None)
        if data is None:
            Logger.warn(f'Attempted to release unknown buffer: {handle}')

    @contextmanager
    def acquire(self, data: bytes) -> Iterator[int]:
        handle = self.store(data)
        try:
            yield handle
        finally:
            self.release(handle)


def dumps(obj: Any) -> bytes:
    if hasattr(obj, 'to_dict'):
        obj = obj.to_dict()
    return json.dumps(obj, ensure_ascii=False).encode('utf-8')


def serialize_and_pack(registry: BufferRegistry, obj: Any) -> int:
    data = dumps(obj)
    return pack(registry.store(data), len(data))


def decode_request(payload: bytes) -> Dict[str, Any]:
    try:
        text = payload.decode('utf-8')
    except UnicodeDecodeError as e:
        raise TransportError(f'request is not valid UTF-8: {e}') from e
    try:
        request = json.loads(text)
    except ValueError as e:
        raise TransportError(f'request is not valid JSON: {e}') from e
    if not isinstance(request, dict):
        raise TransportError('request must be a JSON object')
    if not isinstance(request.get('content'), str):
        raise TransportError('request has no string content')
    return request


def error_response(message: str) -> bytes:
    return dumps({'success': False, 'error': message})


def handle_request(payload: bytes) -> bytes:
    """
    Answer one `{"content", "language", "color_count"}` request with a
    `{"success", "result"}` response. Bad requests are answered with
    `{"success": false, "error"}` instead of raising to the host.
    """
    try:
        request = decode_request(payload)
        color_count = request.get('color_count', DEFAULT_COLOR_COUNT)
        if not isinstance(color_count, int) or isinstance(color_count, bool):
            raise TransportError(f'bad color_count: {color_count!r}')
        scheme = ColorScheme.with_count(color_count)
    except BracketColorizerError as e:
        Logger.print(f'Rejected request: {e}')
        return error_response(str(e))
    language = Language.from_str(request.get('language'))

    result = BracketMatcher(scheme).match_brackets(
        request['content'], language)
    return dumps({'success': True, 'result': result.to_dict()})


def handle_packed_request(registry: BufferRegistry, payload: bytes) -> int:
    response = handle_request(payload)
    return pack(registry.store(response), len(response))

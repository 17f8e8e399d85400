"""A minimal language server speaking JSON-RPC over stdio, and its command."""

from __future__ import annotations

import json
import sys
from typing import Any, BinaryIO, Optional

from .completion import CompletionKind, complete

_LSP_KINDS = {
    CompletionKind.KEYWORD: 14,
    CompletionKind.COLOR: 16,
    CompletionKind.VARIABLE: 6,
    CompletionKind.FORMAT: 21,
    CompletionKind.SNIPPET: 15,
}

_SNIPPET_FORMAT = 2

_CAPABILITIES = {
    "capabilities": {
        "completionProvider": {"triggerCharacters": [" "]},
        "textDocumentSync": 1,
    }
}

_HEADER_PREFIX = "Content-Length: "
_U64_LIMIT = 2**64


class DocumentStore:
    """The open documents, keyed by URI."""

    def __init__(self) -> None:
        self._documents: dict[str, str] = {}

    def open(self, uri: str, text: str) -> None:
        self._documents[uri] = text

    def update(self, uri: str, text: str) -> None:
        self._documents[uri] = text

    def get(self, uri: str) -> Optional[str]:
        return self._documents.get(uri)


def _parse_length(text: str) -> Optional[int]:
    digits = text[1:] if text.startswith("+") else text
    if not digits or not (digits.isascii() and digits.isdigit()):
        return None
    return int(digits)


def read_message(stream: BinaryIO) -> Optional[str]:
    """Read one framed message body, or None at end of input or on a bad frame."""
    content_length = 0
    while True:
        raw = stream.readline()
        if not raw:
            return None
        try:
            header = raw.decode("utf-8").strip()
        except UnicodeDecodeError:
            return None
        if not header:
            break
        if header.startswith(_HEADER_PREFIX):
            length = _parse_length(header[len(_HEADER_PREFIX):])
            if length is None:
                return None
            content_length = length

    if content_length == 0:
        return None

    body = stream.read(content_length)
    if body is None or len(body) < content_length:
        return None
    try:
        return body.decode("utf-8")
    except UnicodeDecodeError:
        return None


def send_response(stream: BinaryIO, id: Any, result: Any) -> None:
    """Write a framed JSON-RPC response and flush."""
    body = json.dumps(
        {"jsonrpc": "2.0", "id": id, "result": result},
        separators=(",", ":"),
        ensure_ascii=False,
    ).encode("utf-8")
    stream.write(f"Content-Length: {len(body)}\r\n\r\n".encode("ascii") + body)
    stream.flush()


def _is_u64(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value < _U64_LIMIT


def _text_document(params: Any) -> Optional[dict]:
    if not isinstance(params, dict):
        return None
    document = params.get("textDocument")
    if not isinstance(document, dict) or not isinstance(document.get("uri"), str):
        return None
    return document


def _did_open(params: Any) -> Optional[tuple[str, str]]:
    document = _text_document(params)
    if document is None or not isinstance(document.get("text"), str):
        return None
    return document["uri"], document["text"]


def _did_change(params: Any) -> Optional[tuple[str, list[str]]]:
    document = _text_document(params)
    if document is None:
        return None
    changes = params.get("contentChanges")
    if not isinstance(changes, list):
        return None
    if not all(isinstance(change, dict) and isinstance(change.get("text"), str) for change in changes):
        return None
    return document["uri"], [change["text"] for change in changes]


def _position_params(params: Any) -> Optional[tuple[str, int, int]]:
    document = _text_document(params)
    if document is None:
        return None
    position = params.get("position")
    if not isinstance(position, dict):
        return None
    line, character = position.get("line"), position.get("character")
    if not (_is_u64(line) and _is_u64(character)):
        return None
    return document["uri"], line, character


def _lsp_items(source: Optional[str], line: int, character: int) -> list[dict[str, Any]]:
    if source is None:
        return []
    items = []
    for item in complete(source, line + 1, character + 1):
        entry: dict[str, Any] = {"label": item.label, "kind": _LSP_KINDS[item.kind]}
        if item.snippet is not None:
            entry["insertText"] = item.snippet
            entry["insertTextFormat"] = _SNIPPET_FORMAT
        items.append(entry)
    return items


def _require_id(message: dict, method: str) -> Any:
    message_id = message.get("id")
    if message_id is None:
        raise ValueError(f"request '{method}' has no id")
    return message_id


def run(reader: Optional[BinaryIO] = None, writer: Optional[BinaryIO] = None) -> None:
    """Serve requests from ``reader`` to ``writer`` until exit or end of input."""
    reader = sys.stdin.buffer if reader is None else reader
    writer = sys.stdout.buffer if writer is None else writer
    store = DocumentStore()

    while (content := read_message(reader)) is not None:
        try:
            message = json.loads(content)
        except ValueError:
            continue
        if not isinstance(message, dict):
            continue
        method = message.get("method")
        if method is None or not isinstance(method, str):
            continue
        params = message.get("params")

        if method == "initialize":
            send_response(writer, _require_id(message, method), _CAPABILITIES)
        elif method == "shutdown":
            send_response(writer, _require_id(message, method), None)
        elif method == "exit":
            break
        elif method == "textDocument/didOpen":
            opened = _did_open(params)
            if opened is not None:
                store.open(*opened)
        elif method == "textDocument/didChange":
            changed = _did_change(params)
            if changed is not None and changed[1]:
                store.update(changed[0], changed[1][-1])
        elif method == "textDocument/completion":
            request = _position_params(params)
            if request is not None:
                uri, line, character = request
                items = _lsp_items(store.get(uri), line, character)
                send_response(writer, _require_id(message, method), items)


def _as_u64(value: Any, default: int) -> int:
    return value if _is_u64(value) else default


def main(argv: Optional[list[str]] = None) -> int:
    """Run the server, or answer one completion request read from stdin."""
    arguments = sys.argv[1:] if argv is None else argv

    if not arguments or arguments[0] != "complete":
        run()
        return 0

    try:
        text = sys.stdin.read()
    except (OSError, UnicodeDecodeError) as error:
        print(f"error: failed to read stdin: {error}", file=sys.stderr)
        return 1

    try:
        request = json.loads(text)
    except ValueError as error:
        print(f"error: invalid JSON: {error}", file=sys.stderr)
        return 1

    fields = request if isinstance(request, dict) else {}
    source = fields.get("source")
    source = source if isinstance(source, str) else ""
    line = _as_u64(fields.get("line"), 1)
    column = _as_u64(fields.get("column"), 1)

    items = complete(source, line, column)
    print(json.dumps([item.to_dict() for item in items], separators=(",", ":"), ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
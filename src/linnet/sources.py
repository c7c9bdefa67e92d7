"""Structured file sources.

Every file the site reads — locale registry, page index, page data, the
JSON cascade, environment ``.ini`` files, asset and package manifests —
goes through the two readers here. Optional files are read with
``missing_ok=True`` and contribute nothing when absent.
"""

import configparser
import json
import logging
from pathlib import Path
from typing import Any

from linnet.errors import ConfigurationError

logger = logging.getLogger("linnet.sources")

# Section that receives keys declared before the first ``[section]`` header
_ROOT_SECTION = "__root__"


def read_json(path: str | Path, *, missing_ok: bool = False) -> Any:
    """Decode a JSON file.

    Returns ``None`` for a missing file when *missing_ok* is set.

    Raises:
        FileNotFoundError: If the file is missing and *missing_ok* is false.
        ConfigurationError: If the file is not valid JSON.
    """
    file = Path(path)
    try:
        text = file.read_text(encoding="utf-8")
    except FileNotFoundError:
        if not missing_ok:
            raise
        logger.debug("Optional file %s not found", file)
        return None
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        msg = f"Invalid JSON in {file}: {exc}"
        raise ConfigurationError(msg) from exc


def read_ini(path: str | Path) -> dict[str, Any]:
    """Parse an ``.ini`` file into ``{section: {key: value}}``.

    Keys are case-sensitive and values are kept as raw strings. Keys that
    appear before the first section header land at the top level. A
    ``;`` after whitespace starts a comment, also at the end of a value.

    Raises:
        ConfigurationError: If the file cannot be parsed.
    """
    file = Path(path)
    parser = configparser.ConfigParser(
        interpolation=None,
        strict=False,
        inline_comment_prefixes=(";",),
    )
    parser.optionxform = str  # type: ignore[assignment, method-assign]
    text = file.read_text(encoding="utf-8")
    try:
        parser.read_string(f"[{_ROOT_SECTION}]\n{text}", source=str(file))
    except configparser.Error as exc:
        msg = f"Invalid ini file {file}: {exc}"
        raise ConfigurationError(msg) from exc

    result: dict[str, Any] = _section(parser, _ROOT_SECTION)
    for section in parser.sections():
        if section == _ROOT_SECTION:
            continue
        result[section] = _section(parser, section)
    return result


def _section(parser: configparser.ConfigParser, name: str) -> dict[str, str]:
    return {key: _unquote(value) for key, value in parser.items(name)}


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        return value[1:-1]
    return value

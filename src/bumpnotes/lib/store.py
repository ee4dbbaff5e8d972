"""Settings stores holding the project's version and product name.

The editor depends only on the :class:`SettingsStore` protocol. Three
implementations are provided:

- :class:`MemorySettingsStore`: in-process values, for embedding and tests.
- :class:`JsonSettingsStore`: a ``version.json`` file with
  ``bundleVersion`` and ``productName`` keys.
- :class:`UnityProjectSettingsStore`: edits ``bundleVersion`` in a Unity
  ``ProjectSettings.asset`` in place, leaving every other byte untouched.

Examples:
    >>> store = MemorySettingsStore(version="1.2.3", product_name="Game")
    >>> store.set_version("1.3.0")
    >>> store.get_version()
    '1.3.0'
"""

import json
import logging
import re
from pathlib import Path
from typing import Literal, Protocol, TypeAlias, runtime_checkable

from bumpnotes.lib.paths import JSON_SETTINGS_NAME, UNITY_SETTINGS_RELPATH, project_root

logger = logging.getLogger(__name__)

StoreKind: TypeAlias = Literal["auto", "unity", "json"]


class SettingsStoreError(RuntimeError):
    """Raised when a settings file or one of its keys is missing or malformed."""


@runtime_checkable
class SettingsStore(Protocol):
    """Key-value store the version editor reads from and writes to."""

    def get_version(self) -> str: ...

    def set_version(self, version: str) -> None: ...

    def get_product_name(self) -> str: ...


class MemorySettingsStore:
    """Settings held in memory."""

    def __init__(self, version: str = "0.1.0", product_name: str = "Product") -> None:
        self.version = version
        self.product_name = product_name

    def get_version(self) -> str:
        return self.version

    def set_version(self, version: str) -> None:
        self.version = version

    def get_product_name(self) -> str:
        return self.product_name


class JsonSettingsStore:
    """Settings kept in a JSON object on disk.

    Unknown keys are preserved when the version is written back.
    """

    def __init__(
        self,
        path: Path,
        *,
        version_key: str = "bundleVersion",
        product_key: str = "productName",
    ) -> None:
        self.path = path
        self.version_key = version_key
        self.product_key = product_key

    def _load(self) -> dict[str, object]:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError as e:
            raise SettingsStoreError(f"Settings file not found: {self.path}") from e
        except json.JSONDecodeError as e:
            raise SettingsStoreError(f"Invalid JSON in {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise SettingsStoreError(f"Expected a JSON object in {self.path}")
        return data

    def _get(self, key: str) -> str:
        data = self._load()
        if key not in data:
            raise SettingsStoreError(f"Key {key!r} missing from {self.path}")
        value = data[key]
        # Versions must be JSON strings: the number 1.10 reads back as 1.1.
        if not isinstance(value, str):
            raise SettingsStoreError(
                f"Key {key!r} in {self.path} must be a string, got {value!r}"
            )
        return value

    def get_version(self) -> str:
        return self._get(self.version_key)

    def set_version(self, version: str) -> None:
        data = self._load()
        data[self.version_key] = version
        self.path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
        logger.debug("Wrote %s=%s to %s", self.version_key, version, self.path)

    def get_product_name(self) -> str:
        return self._get(self.product_key)


def _key_pattern(key: str) -> re.Pattern[str]:
    # Top-level PlayerSettings keys are indented by two spaces.
    return re.compile(
        rf"^[ \t]*{re.escape(key)}:[ \t]*(?P<value>[^\r\n]*?)[ \t]*(?=\r?$)",
        re.MULTILINE,
    )


_BUNDLE_VERSION_RE = _key_pattern("bundleVersion")
_PRODUCT_NAME_RE = _key_pattern("productName")


class UnityProjectSettingsStore:
    """Settings read from and written to a Unity ``ProjectSettings.asset``.

    The asset is YAML, but it is edited line-wise so Unity's formatting,
    tags and line endings survive a round trip.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def _read(self) -> str:
        try:
            return self.path.read_bytes().decode("utf-8")
        except FileNotFoundError as e:
            raise SettingsStoreError(f"Project settings not found: {self.path}") from e

    def _match(self, text: str, pattern: re.Pattern[str], key: str) -> re.Match[str]:
        m = pattern.search(text)
        if m is None:
            raise SettingsStoreError(f"Key {key!r} missing from {self.path}")
        return m

    def get_version(self) -> str:
        m = self._match(self._read(), _BUNDLE_VERSION_RE, "bundleVersion")
        return _unquote(m.group("value"))

    def set_version(self, version: str) -> None:
        text = self._read()
        m = self._match(text, _BUNDLE_VERSION_RE, "bundleVersion")
        updated = text[: m.start("value")] + version + text[m.end("value") :]
        self.path.write_bytes(updated.encode("utf-8"))
        logger.debug("Wrote bundleVersion=%s to %s", version, self.path)

    def get_product_name(self) -> str:
        m = self._match(self._read(), _PRODUCT_NAME_RE, "productName")
        return _unquote(m.group("value"))


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "'\"":
        return value[1:-1]
    return value


def open_store(
    kind: StoreKind = "auto",
    *,
    root: Path | None = None,
    settings_file: Path | None = None,
) -> SettingsStore:
    """Create a store for the project at ``root``.

    Args:
        kind: ``unity``, ``json``, or ``auto`` (Unity asset first, then
            ``version.json``).
        root: Project root; defaults to :func:`bumpnotes.lib.paths.project_root`.
        settings_file: Explicit settings file, overriding the default location.

    Raises:
        SettingsStoreError: If ``auto`` finds no settings file.
    """
    base = root or project_root()
    unity_path = settings_file or base / UNITY_SETTINGS_RELPATH
    json_path = settings_file or base / JSON_SETTINGS_NAME

    if kind == "unity":
        return UnityProjectSettingsStore(unity_path)
    if kind == "json":
        return JsonSettingsStore(json_path)

    if settings_file is not None:
        if settings_file.suffix == ".json":
            return JsonSettingsStore(settings_file)
        return UnityProjectSettingsStore(settings_file)
    if unity_path.exists():
        logger.debug("Using Unity project settings at %s", unity_path)
        return UnityProjectSettingsStore(unity_path)
    if json_path.exists():
        logger.debug("Using JSON settings at %s", json_path)
        return JsonSettingsStore(json_path)
    raise SettingsStoreError(f"No project settings found under {base}")

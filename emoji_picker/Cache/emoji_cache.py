# emoji_picker/Cache/emoji_cache.py
# Description: Local on-disk cache for the keyword-indexed emoji dataset.
#
# The dataset is fetched once from a fixed remote URL, written verbatim to
# <data_dir>/emojis.json and read back from there on every later run.
#
# Imports
import os
from pathlib import Path
from typing import Dict, List, Optional, Union
#
# Third-Party Imports
import httpx
from loguru import logger
from pydantic import BaseModel, TypeAdapter, ValidationError
#
#######################################################################################################################
#
# Constants:

EMOJI_URL = "https://github.com/muan/emojilib/raw/refs/tags/v4.0.0/dist/emoji-en-US.json"
CACHE_VERSION = "1.0"
APP_DIR_NAME = "emoji-picker"
DATASET_FILENAME = "emojis.json"
METADATA_FILENAME = "metadata.json"

Dataset = Dict[str, List[str]]

_DATASET_ADAPTER = TypeAdapter(Dataset)

logger = logger.bind(module="emoji_cache")


class EmojiCacheError(Exception):
    """Base class for dataset cache errors."""
    pass


class FetchError(EmojiCacheError):
    """The dataset could not be downloaded (transport error or non-2xx status)."""
    pass


class ParseError(EmojiCacheError):
    """The cached file or response body is not a mapping of emoji to keyword lists."""
    pass


class CacheIOError(EmojiCacheError):
    """A filesystem operation on the cache directory failed."""
    pass


class CacheMetadata(BaseModel):
    """Written next to the dataset. Not validated on read."""
    version: str = CACHE_VERSION


def get_data_dir() -> Path:
    """Resolve the cache directory, honouring $XDG_DATA_HOME."""
    data_home = os.environ.get("XDG_DATA_HOME")
    if data_home:
        base = Path(data_home)
    else:
        base = Path.home() / ".local" / "share"
    return base / APP_DIR_NAME


def parse_dataset(raw: bytes) -> Dataset:
    """
    Parse raw dataset bytes into an emoji -> keywords mapping.

    Key order of the JSON document is preserved.

    Raises:
        ParseError: If the bytes are not JSON of the expected shape.
    """
    try:
        return _DATASET_ADAPTER.validate_json(raw, strict=True)
    except ValidationError as e:
        raise ParseError(f"failed to parse emoji dataset: {e.errors()[0]['msg']}") from e


class DatasetCache:
    """Loads the emoji dataset from disk, downloading it on first use."""

    def __init__(
        self,
        data_dir: Optional[Union[str, Path]] = None,
        url: str = EMOJI_URL,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.Client] = None,
    ):
        """
        Args:
            data_dir: Cache directory. Defaults to get_data_dir().
            url: Remote dataset location.
            timeout: HTTP timeout in seconds. None waits indefinitely.
            http_client: Client to use instead of a fresh one (tests inject a mock transport).
        """
        self.data_dir = Path(data_dir) if data_dir else get_data_dir()
        self.url = url
        self.timeout = timeout
        self._http_client = http_client

    @property
    def dataset_path(self) -> Path:
        return self.data_dir / DATASET_FILENAME

    @property
    def metadata_path(self) -> Path:
        return self.data_dir / METADATA_FILENAME

    def exists(self) -> bool:
        return self.dataset_path.exists()

    def load(self) -> Dataset:
        """
        Return the dataset, fetching and persisting it if it is not cached yet.

        Raises:
            FetchError: Download failed.
            ParseError: Cached bytes are malformed.
            CacheIOError: Cache directory or files could not be created or read.
        """
        if not self.exists():
            logger.info(f"No cached dataset at {self.dataset_path}, downloading from {self.url}")
            self._download()
        else:
            logger.debug(f"Using cached dataset at {self.dataset_path}")

        try:
            raw = self.dataset_path.read_bytes()
        except OSError as e:
            raise CacheIOError(f"failed to read cache: {e}") from e

        dataset = parse_dataset(raw)
        logger.info(f"Loaded {len(dataset)} emojis from cache")
        return dataset

    def load_metadata(self) -> Optional[CacheMetadata]:
        """Read metadata.json, or None if it is missing or unreadable."""
        try:
            return CacheMetadata.model_validate_json(self.metadata_path.read_bytes())
        except (OSError, ValidationError) as e:
            logger.debug(f"No usable cache metadata at {self.metadata_path}: {e}")
            return None

    def _fetch(self) -> bytes:
        client = self._http_client or httpx.Client(timeout=self.timeout, follow_redirects=True)
        try:
            response = client.get(self.url)
        except httpx.HTTPError as e:
            raise FetchError(f"failed to download emojis: {e}") from e
        finally:
            if self._http_client is None:
                client.close()

        if not response.is_success:
            raise FetchError(f"failed to download emojis: unexpected status: {response.status_code}")
        return response.content

    def _download(self) -> None:
        # Not transactional: an interrupted write leaves a partial emojis.json
        # that the next run treats as present.
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise CacheIOError(f"failed to create cache directory {self.data_dir}: {e}") from e

        body = self._fetch()

        try:
            self.dataset_path.write_bytes(body)
            self.metadata_path.write_text(CacheMetadata().model_dump_json(), encoding="utf-8")
        except OSError as e:
            raise CacheIOError(f"failed to write cache: {e}") from e
        logger.info(f"Cached {len(body)} bytes of emoji data in {self.data_dir}")

#
# End of emoji_cache.py
#######################################################################################################################

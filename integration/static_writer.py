# integration/static_writer.py
from __future__ import annotations
import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Dict, List, Optional, Union

from core.config import Config

logger = logging.getLogger(__name__)


def read_redirects_prefix(static_dir: Union[str, Path, None] = None) -> str:
    path = Path(static_dir or Config.STATIC_DIR) / "_redirects"
    return path.read_text(encoding="utf-8")


class StaticApiWriter:
    """
    Zapis plików statycznego API do dist/.
    Pliki są niezależne (każdy w innej ścieżce), więc piszemy je równolegle
    i czekamy na wszystkie przed końcem przebiegu.
    """

    def __init__(self, dist_dir: Union[str, Path, None] = None, max_workers: Optional[int] = None) -> None:
        self.dist_dir = Path(dist_dir or Config.DIST_DIR)
        self.max_workers = max(1, max_workers or Config.WRITER_MAX_WORKERS)

    def _write_one(self, rel_path: str, content: str) -> Path:
        target = self.dist_dir / rel_path
        target.write_text(content, encoding="utf-8")
        logger.debug("Wrote %s", target)
        return target

    def write(self, artifacts: Dict[str, str]) -> List[Path]:
        if not artifacts:
            return []
        (self.dist_dir / "api").mkdir(parents=True, exist_ok=True)

        written: List[Path] = []
        with ThreadPoolExecutor(max_workers=min(self.max_workers, len(artifacts))) as executor:
            futures = {
                executor.submit(self._write_one, rel_path, content): rel_path
                for rel_path, content in artifacts.items()
            }
            for future in as_completed(futures):
                # pierwszy błąd zapisu przerywa przebieg
                written.append(future.result())

        logger.info("Wrote %d files to %s", len(written), self.dist_dir)
        return written

# products/storage.py
"""
상품 이미지 저장소.

- 업로드 파일은 "<업로드 시각(ms)>-<원본 파일명>" 으로 저장한다.
- 공개 URL 은 생성 시 주입받은 base_url + /uploads/<파일명>.
- 삭제는 best-effort: 실패해도 경고 로그만 남기고 False 를 돌려준다.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Optional, Union

from django.core.exceptions import SuspiciousFileOperation
from django.core.files.storage import FileSystemStorage
from django.core.files.uploadedfile import UploadedFile

logger = logging.getLogger(__name__)


class ImageStore:
    def __init__(
        self,
        location: Union[str, Path],
        base_url: str,
        public_path: str = "/uploads/",
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.public_path = "/" + public_path.strip("/") + "/"
        self.storage = FileSystemStorage(location=str(location), base_url=self.public_path)

    def save(self, upload: UploadedFile) -> str:
        """파일을 저장하고 실제 저장된 파일명을 돌려준다 (충돌 시 storage 가 이름을 바꿀 수 있음)."""
        original_name = Path(upload.name or "image").name
        name = f"{int(time.time() * 1000)}-{original_name}"
        stored = self.storage.save(name, upload)
        logger.debug("Stored image %s", stored)
        return stored

    def url_for(self, filename: str) -> str:
        return f"{self.base_url}{self.public_path}{filename}"

    @staticmethod
    def filename_from_url(url: Optional[str]) -> Optional[str]:
        if not url:
            return None
        name = url.rstrip("/").split("/")[-1]
        return name or None

    def delete(self, filename: Optional[str]) -> bool:
        if not filename:
            return False
        try:
            self.storage.delete(filename)
        except (OSError, SuspiciousFileOperation) as exc:
            logger.warning("Could not delete image file %s: %s", filename, exc)
            return False
        return True

    def delete_by_url(self, url: Optional[str]) -> bool:
        return self.delete(self.filename_from_url(url))

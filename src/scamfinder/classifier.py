"""Content classification for uploaded files.

Maps a file name and its declared MIME type to a ``ContentCategory`` and a
normalized MIME type. Classification never sniffs bytes and never fails:
anything unrecognised is a generic document.
"""

from __future__ import annotations

from scamfinder.models.content import ClassifiedContent, ContentCategory

EMAIL_CONTAINER_MIME = "application/vnd.ms-outlook"
HTML_MIME = "text/html"
FALLBACK_MIME = "application/octet-stream"

EMAIL_EXTENSIONS = frozenset({"msg", "eml"})
HTML_EXTENSIONS = frozenset({"html", "htm"})

IMAGE_EXTENSION_TYPES: dict[str, str] = {
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "png": "image/png",
    "webp": "image/webp",
    "heic": "image/heic",
    "heif": "image/heif",
    "bmp": "image/bmp",
    "tiff": "image/tiff",
    "tif": "image/tiff",
    "ico": "image/x-icon",
}

# Upload filter groups offered to users. Informational: classification
# accepts any file.
ACCEPTED_FILE_TYPES: dict[str, tuple[str, ...]] = {
    "images": ("jpg", "jpeg", "png", "webp", "heic", "heif", "bmp", "tiff", "tif"),
    "docs": ("pdf", "doc", "docx", "xls", "xlsx", "ppt", "pptx", "txt"),
    "web": ("msg", "html", "htm", "eml"),
}
ACCEPTED_FILE_TYPES["all"] = (
    ACCEPTED_FILE_TYPES["images"] + ACCEPTED_FILE_TYPES["docs"] + ACCEPTED_FILE_TYPES["web"]
)


def file_extension(file_name: str) -> str:
    """Return the lower-cased text after the last dot.

    A name without a dot is its own extension, so ``"png"`` yields ``"png"``.
    """
    return file_name.rpartition(".")[2].strip().lower()


def classify(file_name: str, declared_mime_type: str | None = "") -> ClassifiedContent:
    """Classify an uploaded file.

    Rules, first match wins:

    1. ``.msg`` / ``.eml`` → email container (``application/vnd.ms-outlook``)
    2. ``.html`` / ``.htm`` → HTML source (``text/html``)
    3. non-empty declared MIME type → used verbatim; image if ``image/*``
    4. known image extension → its canonical ``image/*`` type
    5. anything else → generic document (``application/octet-stream``)

    Args:
        file_name: Original file name, used only for its extension.
        declared_mime_type: MIME type reported by the uploader, may be empty.

    Returns:
        The category and the normalized MIME type.
    """
    ext = file_extension(file_name)
    declared = (declared_mime_type or "").strip()

    if ext in EMAIL_EXTENSIONS:
        return ClassifiedContent(ContentCategory.EMAIL_CONTAINER, EMAIL_CONTAINER_MIME)
    if ext in HTML_EXTENSIONS:
        return ClassifiedContent(ContentCategory.HTML_SOURCE, HTML_MIME)
    if declared:
        if declared.lower().startswith("image/"):
            return ClassifiedContent(ContentCategory.IMAGE, declared)
        return ClassifiedContent(ContentCategory.GENERIC_DOCUMENT, declared)
    if ext in IMAGE_EXTENSION_TYPES:
        return ClassifiedContent(ContentCategory.IMAGE, IMAGE_EXTENSION_TYPES[ext])
    return ClassifiedContent(ContentCategory.GENERIC_DOCUMENT, FALLBACK_MIME)


def is_accepted_extension(file_name: str, group: str = "all") -> bool:
    """Return True if *file_name* falls in an upload filter group.

    Raises:
        KeyError: If *group* is not one of ``images``, ``docs``, ``web``, ``all``.
    """
    return file_extension(file_name) in ACCEPTED_FILE_TYPES[group]

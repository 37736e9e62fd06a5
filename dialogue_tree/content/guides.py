"""
Guides content collection: Markdown documents with YAML frontmatter.

Each guide must declare ``title``, ``author``, ``description`` and
``bannerImg`` as strings. Anything else in the frontmatter is ignored.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml
from pydantic import BaseModel, ConfigDict, Field, StrictStr
from pydantic import ValidationError as PydanticValidationError

from dialogue_tree.errors import GuideValidationError

logger = logging.getLogger(__name__)

GUIDE_SUFFIXES = (".md", ".mdx")
# Only present in a source checkout; installed copies pass a directory explicitly
DEFAULT_GUIDES_ROOT = Path(__file__).parent.parent.parent / "content" / "guides"
FRONTMATTER_FENCE = "---"


class GuideFrontmatter(BaseModel):
    """Schema every guide's frontmatter must satisfy"""

    model_config = ConfigDict(frozen=True)

    title: StrictStr
    author: StrictStr
    description: StrictStr
    banner_img: StrictStr = Field(alias="bannerImg")


@dataclass
class ValidationIssue:
    """A single problem found in a guide document"""

    file: str
    field: str
    message: str


@dataclass
class Guide:
    """A validated guide"""

    slug: str
    frontmatter: GuideFrontmatter
    body: str
    path: Optional[Path] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "slug": self.slug,
            **self.frontmatter.model_dump(by_alias=True),
        }


def split_frontmatter(text: str) -> Tuple[Optional[str], str]:
    """
    Separate the ``---`` fenced frontmatter block from the body.

    Returns (frontmatter, body); frontmatter is None when the document has
    no opening fence or the block is never closed.
    """
    lines = text.lstrip("\ufeff").splitlines(keepends=True)
    if not lines or lines[0].strip() != FRONTMATTER_FENCE:
        return None, text

    for index in range(1, len(lines)):
        if lines[index].strip() == FRONTMATTER_FENCE:
            return "".join(lines[1:index]), "".join(lines[index + 1:])
    return None, text


def _issues_from_pydantic(slug: str, error: PydanticValidationError) -> List[ValidationIssue]:
    issues = []
    for item in error.errors():
        field_name = ".".join(str(part) for part in item["loc"]) or "frontmatter"
        issues.append(ValidationIssue(slug, field_name, item["msg"]))
    return issues


def parse_guide(text: str, slug: str, path: Path = None) -> Guide:
    """
    Parse and validate one guide document.

    Raises:
        GuideValidationError: listing every problem with the frontmatter
    """
    raw, body = split_frontmatter(text)
    if raw is None:
        raise GuideValidationError(slug, [ValidationIssue(slug, "frontmatter", "Missing frontmatter block")])

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise GuideValidationError(slug, [ValidationIssue(slug, "frontmatter", f"Invalid YAML: {e}")]) from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise GuideValidationError(slug, [ValidationIssue(slug, "frontmatter", "Frontmatter must be a mapping")])

    try:
        frontmatter = GuideFrontmatter.model_validate(data)
    except PydanticValidationError as e:
        raise GuideValidationError(slug, _issues_from_pydantic(slug, e)) from e

    return Guide(slug=slug, frontmatter=frontmatter, body=body, path=path)


def guide_files(directory: Path) -> List[Path]:
    """Guide documents under directory, sorted by path"""
    directory = Path(directory)
    if not directory.exists():
        return []
    return sorted(p for p in directory.rglob("*") if p.is_file() and p.suffix in GUIDE_SUFFIXES)


def _slug_for(path: Path, directory: Path) -> str:
    return path.relative_to(directory).with_suffix("").as_posix()


def load_guide(path: Path, directory: Path = None) -> Guide:
    path = Path(path)
    slug = _slug_for(path, Path(directory)) if directory is not None else path.stem
    with open(path, "r", encoding="utf-8") as f:
        text = f.read()
    return parse_guide(text, slug, path=path)


def load_guides(directory: Path) -> List[Guide]:
    """Load every guide in directory; the first invalid one raises"""
    return [load_guide(path, directory) for path in guide_files(directory)]


class GuideValidator:
    """Validates a whole guides directory, collecting every issue"""

    def __init__(self, directory: Path):
        self.directory = Path(directory)
        self.guides: List[Guide] = []
        self.issues: List[ValidationIssue] = []

    def validate(self) -> bool:
        """Main validation method"""
        self.guides = []
        self.issues = []

        if not self.directory.exists():
            self.issues.append(ValidationIssue(str(self.directory), "directory", "Guides directory not found"))
            return False

        for path in guide_files(self.directory):
            try:
                self.guides.append(load_guide(path, self.directory))
            except GuideValidationError as e:
                logger.warning("%s", e)
                self.issues.extend(e.issues)
            except (OSError, UnicodeDecodeError) as e:
                slug = _slug_for(path, self.directory)
                logger.warning("Could not read guide %s: %s", slug, e)
                self.issues.append(ValidationIssue(slug, "file", f"Could not read file: {e}"))

        return len(self.issues) == 0

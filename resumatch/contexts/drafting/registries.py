"""
Cover-letter template registry for the Drafting context.

Templates are plain-text Jinja2 files stored as
resumatch/contexts/drafting/templates/{template_name}.txt.jinja
"""

from pathlib import Path
from typing import Dict, List

from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateNotFound

DEFAULT_TEMPLATES_PATH = Path(__file__).resolve().parent / "templates"
TEMPLATE_SUFFIX = ".txt.jinja"


def excerpt(text: str, length: int) -> str:
    """
    Shorten text to at most length characters, cutting at a word boundary.

    Example:
        >>> excerpt("Led migration of billing services to AWS", 20)
        'Led migration of...'
    """
    text = text.strip()
    if len(text) <= length:
        return text
    cut = text[: length - 3]
    if " " in cut:
        cut = cut.rsplit(" ", 1)[0]
    return cut.rstrip(" ,;:.") + "..."


def lower_first(text: str) -> str:
    """Lowercase the first character so a sentence fragment reads mid-sentence."""
    return text[:1].lower() + text[1:]


def sentence(text: str) -> str:
    """Terminate text with a period unless it already ends a sentence."""
    text = text.rstrip()
    return text if not text or text[-1] in ".!?" else text + "."


class CoverLetterTemplateRegistry:
    """
    Registry for loading and caching cover-letter templates.

    Templates render with StrictUndefined so a missing context value fails
    loudly instead of leaving a blank in the letter. Block tags sit on their
    own lines (trim_blocks/lstrip_blocks remove them cleanly).
    """

    def __init__(self, templates_path: Path = None):
        """
        Initialize the template registry.

        Args:
            templates_path: Directory holding *.txt.jinja templates. Defaults
                            to the templates packaged with resumatch
        """
        if templates_path is None:
            templates_path = DEFAULT_TEMPLATES_PATH

        self.templates_path = Path(templates_path)
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_path)),
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=False,
            autoescape=False,
        )
        self.env.filters["excerpt"] = excerpt
        self.env.filters["lower_first"] = lower_first
        self.env.filters["sentence"] = sentence

    def get_template(self, template_name: str) -> Template:
        """
        Get a template by name, loading and caching it if necessary.

        Args:
            template_name: Name of the template (e.g., 'professional')

        Returns:
            Jinja2 Template object

        Raises:
            TemplateNotFound: If template file doesn't exist
            TemplateSyntaxError: If template has Jinja2 syntax errors
        """
        if template_name in self._cache:
            return self._cache[template_name]

        template_file = f"{template_name}{TEMPLATE_SUFFIX}"

        try:
            template = self.env.get_template(template_file)
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Cover letter template '{template_name}' not found at "
                f"{self.get_template_path(template_name)}"
            ) from e

        self._cache[template_name] = template
        return template

    def get_template_path(self, template_name: str) -> Path:
        """Get the file path for a template."""
        return self.templates_path / f"{template_name}{TEMPLATE_SUFFIX}"

    def available_templates(self) -> List[str]:
        """Names of all templates in the templates directory, sorted."""
        return sorted(
            path.name[: -len(TEMPLATE_SUFFIX)]
            for path in self.templates_path.glob(f"*{TEMPLATE_SUFFIX}")
        )

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()

    def is_cached(self, template_name: str) -> bool:
        """Check if a template is in the cache."""
        return template_name in self._cache

"""HTML page rendering with Jinja2 templates shipped in kvshortener/templates"""

from jinja2 import Environment, PackageLoader, select_autoescape


DEFAULT_TITLE = 'URL Shortener'

environment = Environment(
    loader=PackageLoader('kvshortener', 'templates'),
    autoescape=select_autoescape(),
    trim_blocks=True,
    lstrip_blocks=True,
)


def render(template_name: str, title: str | None = None, **context) -> str:
    """Render a page template into a complete HTML document

    Args:
        template_name (str): Template file under kvshortener/templates, e.g. 'index.html'.
        title (str | None): Document title. Defaults to 'URL Shortener'.
        **context: Template variables (pages expect base_url).
    """
    return environment.get_template(template_name).render(title=title or DEFAULT_TITLE, **context)

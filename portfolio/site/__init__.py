"""Static site builder: YAML content in, HTML pages under the output dir out."""
from .builder import BUILD_MARKER, OutputDirError, build_site
from .content import ContentError, SiteContent, load_content
from .render import PAGES, render_pages

__all__ = ["BUILD_MARKER", "PAGES", "ContentError", "OutputDirError", "SiteContent", "build_site", "load_content", "render_pages"]

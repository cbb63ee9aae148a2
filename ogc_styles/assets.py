# ============================================================================
# OGC STYLES ASSET RENDERER
# ============================================================================
# STATUS: Core - asset loading and templating
# PURPOSE: Read assets from the asset directory; render stylesheet templates with Jinja2
# EXPORTS: AssetRenderer, render_asset, expand_additional_assets
# DEPENDENCIES: jinja2, ogc_styles.models, exceptions, util_logger
# ============================================================================
"""
Asset Template Renderer.

Stylesheet assets are Jinja2 templates rendered against the catalog, so a
stylesheet body can refer to catalog values:

    {"sprite": "{{ base_resource }}/resources/sprites"}

Available names: ``base_resource``, ``default``, ``styles``,
``additional_formats``, ``additional_assets`` and ``catalog`` (the whole
StylesConfig). Undefined names are errors.

Previews, preloads and additional assets are returned byte for byte.
"""

from pathlib import Path, PurePosixPath
from typing import Any, Dict, Iterable, Iterator, Tuple, Union

from jinja2 import Environment, StrictUndefined, TemplateError

from exceptions import AssetError
from util_logger import LoggerFactory, ComponentType

from .models import AdditionalAsset, StylesConfig

logger = LoggerFactory.create_logger(ComponentType.REPOSITORY, "AssetRenderer")


def _template_context(catalog: StylesConfig) -> Dict[str, Any]:
    return {
        "catalog": catalog,
        "base_resource": catalog.base_resource,
        "default": catalog.default,
        "styles": catalog.styles,
        "additional_formats": catalog.additional_formats,
        "additional_assets": catalog.additional_assets,
    }


class AssetRenderer:
    """
    Loads assets from one asset directory.

    One Jinja2 environment is shared by all templated assets of a run.
    """

    def __init__(self, asset_dir: Union[str, Path], catalog: StylesConfig):
        self.asset_dir = Path(asset_dir)
        self.catalog = catalog
        self.environment = Environment(
            undefined=StrictUndefined,
            autoescape=False,
            keep_trailing_newline=True
        )
        self._context = _template_context(catalog)

    def read(self, filename: str) -> bytes:
        """
        Raw bytes of ``<asset_dir>/<filename>``.

        Raises:
            AssetError: file does not exist or cannot be read
        """
        asset_path = self.asset_dir / filename
        if not asset_path.is_file():
            raise AssetError(f"could not find asset {asset_path}", path=str(asset_path))
        try:
            return asset_path.read_bytes()
        except OSError as e:
            raise AssetError(f"could not read asset {asset_path}: {e}", path=str(asset_path)) from e

    def render(self, filename: str, templated: bool) -> bytes:
        """
        Asset content, rendered when ``templated``.

        Raises:
            AssetError: missing file, undecodable text, template syntax or render error
        """
        content = self.read(filename)
        if not templated:
            return content

        asset_path = self.asset_dir / filename
        try:
            template = self.environment.from_string(content.decode("utf-8"))
            rendered = template.render(**self._context)
        except UnicodeDecodeError as e:
            raise AssetError(f"asset {asset_path} is not UTF-8 text: {e}", path=str(asset_path)) from e
        except TemplateError as e:
            raise AssetError(f"could not render asset {asset_path}: {e}", path=str(asset_path)) from e

        logger.debug(f"Rendered template asset {asset_path}")
        return rendered.encode("utf-8")

    def expand(self, additional_assets: Iterable[AdditionalAsset]) -> Iterator[Tuple[str, str]]:
        """
        Files matched by the additional asset globs.

        Yields:
            (path relative to the asset directory in POSIX form, media type),
            in declaration order, then sorted by path
        """
        for asset in additional_assets:
            pattern = PurePosixPath(asset.path)
            if not asset.path or pattern.is_absolute() or ".." in pattern.parts:
                raise AssetError(
                    f"additional asset pattern must be relative to the asset directory: {asset.path!r}",
                    path=asset.path
                )
            try:
                matches = sorted(p for p in self.asset_dir.glob(asset.path) if p.is_file())
                relative = [p.relative_to(self.asset_dir).as_posix() for p in matches]
            except (NotImplementedError, ValueError) as e:
                raise AssetError(f"invalid additional asset pattern {asset.path!r}: {e}", path=asset.path) from e
            if not relative:
                logger.warning(f"additional asset pattern {asset.path} matched no files in {self.asset_dir}")
            for path in relative:
                yield path, asset.type


def render_asset(asset_dir: Union[str, Path], filename: str, templated: bool,
                 catalog: StylesConfig) -> bytes:
    """Render a single asset; see AssetRenderer.render."""
    return AssetRenderer(asset_dir, catalog).render(filename, templated)


def expand_additional_assets(asset_dir: Union[str, Path],
                             additional_assets: Iterable[AdditionalAsset]) -> Iterator[Tuple[str, str]]:
    """Expand additional asset globs; see AssetRenderer.expand."""
    renderer = AssetRenderer(asset_dir, StylesConfig(base_resource=""))
    return renderer.expand(additional_assets)

"""Build lifecycle hook that packs the bundle output after a build."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Literal

from zippack.app import PackResult, PackService
from zippack.config import PackOptions

PLUGIN_NAME = "vite-plugin-zip-pack"


@dataclass(slots=True)
class BundleHook:
    """A lifecycle hook the host build tool invokes once, in order."""

    handler: Callable[[], PackResult]
    sequential: bool = True


@dataclass(slots=True)
class BuildPlugin:
    """Descriptor registered with the host build tool."""

    close_bundle: BundleHook
    name: str = PLUGIN_NAME
    apply: Literal["build", "serve"] = "build"
    enforce: Literal["pre", "post"] = "post"
    options: PackOptions = field(default_factory=PackOptions)


def zip_pack(
    options: PackOptions | None = None,
    *,
    service: PackService | None = None,
) -> BuildPlugin:
    """Create the plugin that archives the build output on ``close_bundle``.

    Args:
        options: Pack options captured for every invocation
        service: Pack service to use (defaults to a freshly bootstrapped one)

    Returns:
        BuildPlugin whose ``close_bundle.handler`` runs the pack once
    """
    active_options = options or PackOptions()
    if service is None:
        from zippack.bootstrap import bootstrap_application

        service = bootstrap_application().pack_service

    def close_bundle() -> PackResult:
        return service.pack(active_options)

    return BuildPlugin(close_bundle=BundleHook(handler=close_bundle), options=active_options)

"""Resource renderers: pure functions from a state snapshot to a tree."""

from kubelens.renderers.configmaps import render_configmaps, render_secrets
from kubelens.renderers.deployments import render_deployments
from kubelens.renderers.overview import RENDERERS, render_context, render_overview
from kubelens.renderers.pods import render_pods
from kubelens.renderers.services import render_services

__all__ = [
    "RENDERERS",
    "render_configmaps",
    "render_context",
    "render_deployments",
    "render_overview",
    "render_pods",
    "render_secrets",
    "render_services",
]

"""
Generated documentation pages (changelog, special thanks).
"""

from docs_prebuild.generators.afdian import AfdianClient, SponsorTiers, categorize_sponsors
from docs_prebuild.generators.changelog import generate_changelog, render_changelog
from docs_prebuild.generators.github import Contributor, GitHubClient, Release
from docs_prebuild.generators.prebuild import run_prebuild
from docs_prebuild.generators.special_thanks import generate_special_thanks, render_special_thanks

__all__ = [
    "AfdianClient",
    "Contributor",
    "GitHubClient",
    "Release",
    "SponsorTiers",
    "categorize_sponsors",
    "generate_changelog",
    "generate_special_thanks",
    "render_changelog",
    "render_special_thanks",
    "run_prebuild",
]

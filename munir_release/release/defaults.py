from __future__ import annotations

from pathlib import Path

from munir_release.release.model import BranchSpec, PluginSpec, ReleaseConfig

CONFIG_FILE_NAME = ".releaserc"

COMMIT_ANALYZER = "@semantic-release/commit-analyzer"
RELEASE_NOTES_GENERATOR = "@semantic-release/release-notes-generator"
CHANGELOG = "@semantic-release/changelog"
GITHUB = "@semantic-release/github"
GIT = "@semantic-release/git"

PATCH_RELEASE_TYPES: tuple[str, ...] = ("chore", "docs", "perf", "refactor", "fix", "test")

GIT_COMMIT_MESSAGE = "chore(release): v${nextRelease.version} [skip ci]\n\n[skip ci]"


def default_config_path() -> Path:
    return Path.cwd() / CONFIG_FILE_NAME


def default_config() -> ReleaseConfig:
    """Built-in configuration used when no `.releaserc` can be read.

    Returns a fresh value on every call.
    """
    return ReleaseConfig(
        branches=("main", "develop", BranchSpec(name="feature/*")),
        plugins=(
            PluginSpec(
                id=COMMIT_ANALYZER,
                options={
                    "preset": "conventionalcommits",
                    "releaseRules": [
                        {"type": kind, "release": "patch"} for kind in PATCH_RELEASE_TYPES
                    ],
                    "parserOpts": {
                        "noteKeywords": ["BREAKING CHANGE", "BREAKING CHANGES"],
                    },
                },
            ),
            RELEASE_NOTES_GENERATOR,
            CHANGELOG,
            GITHUB,
            PluginSpec(
                id=GIT,
                options={
                    "assets": ["CHANGELOG.md", "package.json"],
                    "message": GIT_COMMIT_MESSAGE,
                },
            ),
        ),
    )

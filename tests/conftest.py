"""Pytest configuration for the cslengine test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 500 examples (thorough property testing)
- ci: CI runs with 50 examples (fast feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- HYPOTHESIS_PROFILE env var -> explicit override
- CI=true environment variable -> "ci" profile
- Otherwise -> "dev" profile (local development)

Shared fixtures build a small English locale, a style with a couple of
macros, and a sample journal article.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from cslengine import CslDate, CslName, ItemData, Locale, Macro, Style, Term, TermForm
from cslengine.runtime import Text

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

settings.register_profile(
    "dev",
    max_examples=500,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context."""
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# SHARED FIXTURES
# =============================================================================


@pytest.fixture
def en_locale() -> Locale:
    """English locale with long, short and verb terms (no verb-short form)."""
    return Locale(
        "en-US",
        {
            TermForm.LONG: {
                "page": Term("page", "pages"),
                "editor": Term("editor", "editors"),
                "and": Term("and"),
                "no date": Term("n.d."),
                "in": Term("in"),
            },
            TermForm.SHORT: {
                "page": Term("p.", "pp."),
                "editor": Term("ed.", "eds."),
            },
            TermForm.VERB: {
                "editor": Term("edited by"),
            },
        },
    )


@pytest.fixture
def article() -> ItemData:
    """The Ritchie and Thompson UNIX paper."""
    return ItemData(
        id="Ritchie:1974:UTS",
        type="article-journal",
        title="The UNIX Time-Sharing System",
        container_title="Commun. A.C.M.",
        volume="17",
        issue="7",
        page="365-375",
        issued=CslDate(date_parts=((1974, 7),)),
        author=(
            CslName(family="Ritchie", given="Dennis M."),
            CslName(family="Thompson", given="Ken"),
        ),
    )


@pytest.fixture
def style() -> Style:
    """Style with a title macro and a journal macro."""
    return Style.from_macros(
        [
            Macro("title", (Text(variable="title"),)),
            Macro(
                "journal",
                (
                    Text(variable="container-title"),
                    Text(variable="volume", prefix=" "),
                ),
            ),
        ]
    )

from __future__ import annotations

# Facade module that re-exports the Spot-it core.
# The Flask app, tools and tests import from here; single-responsibility
# modules live under spotit_core/*.

from spotit_core.deck import Card, Deck, DeckLike  # noqa: F401
from spotit_core.points import (  # noqa: F401
    INF,
    Point,
    plane_size,
    point_index,
    point_at,
    enumerate_points,
)
from spotit_core.primes import ConfigurationError, is_prime, check_order  # noqa: F401
from spotit_core.plane import (  # noqa: F401
    build,
    slanted_line,
    vertical_line,
    infinity_line,
    incidence,
)
from spotit_core.verify import (  # noqa: F401
    Violation,
    VerifyResult,
    find_violations,
    verify,
    verify_dual,
)
from spotit_core.symbols import (  # noqa: F401
    SYMBOLS,
    glyph_for,
    render_card,
    render_deck,
    status_text,
)

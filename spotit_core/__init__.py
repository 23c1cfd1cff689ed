"""
Spot-it core Python package.

This package contains the finite projective plane construction behind the
symbol-matching deck and the checks that every two cards share one symbol.
Modules:
- points.py: Point, closed-form point indices
- primes.py: order validation (ConfigurationError)
- deck.py: Card, Deck
- plane.py: build(), the three line families and incidence()
- verify.py: verify(), find_violations(), verify_dual()
- symbols.py: glyph table and card rendering for hosts
- logging_utils.py: logging setup shared by the hosts
"""

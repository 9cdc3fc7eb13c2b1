"""
typed-snippets: range-bounded random numbers and a typed order document.

- math/      : numeric kinds, entropy sources, RangeRandom
- domain/    : order document models (Pydantic)
- contracts/ : order JSON decoding and bundled samples
"""

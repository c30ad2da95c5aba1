"""
Generators — render generation results as host-language source.

Each generator module exposes a ``render_*()`` function returning text
for one type and a ``generate_*()`` function returning a
``GeneratedFile`` for a set of types.
"""

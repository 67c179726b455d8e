"""Support namespace for cross-cutting, dependency-light helpers.

This package provides a neutral location for small, reusable functions that
would otherwise clutter the cast, colour and sanitizer modules.

Scope:
- Small, stateless helpers with minimal dependencies (host primitive
  conversions, XML escaping, identifier generation).
- No coercion policy: the looser scripted-value rules live in
  ``loosetype.cast``.

Import direction:
- May be imported by any loosetype module. ``primitives`` must only import
  from ``loosetype.domain``.

Public API:
- Nothing is re-exported at the package level. Import specific helpers from
  their defining modules.
"""

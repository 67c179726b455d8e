"""loosetype test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.

General guidance
- Keep tests fast and deterministic; the library does no I/O.
- Property-based tests live with the module they exercise and use @pytest.mark.property.
- Markers: unit, property
"""

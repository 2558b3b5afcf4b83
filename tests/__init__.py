"""company-track test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- integration/  : Real SQLite databases (in memory or in a temp dir).
- e2e/          : The `company-track` command driven through Click's CliRunner.
- fixtures/     : Shared pytest fixtures (no tests here).

General guidance
- Keep unit fast and deterministic (no real I/O); prefer in-memory adapters
  over mocks at boundaries.
- Every test is marked after its top-level folder (unit, integration, e2e).
"""

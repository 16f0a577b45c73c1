"""
Root marker for the test tree.

Only this top-level tests/ directory carries an __init__.py, so helpers can be imported
as `tests.helpers...`. Subdirectories are left as namespace packages (PEP 420).
"""

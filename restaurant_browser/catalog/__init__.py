"""
Restaurant catalog package.

Responsibilities:
- Define the canonical Restaurant record and the closed filter vocabularies.
- Load the bundled restaurant catalog once at startup.
- Summarise the catalog for populating filter controls.
"""

"""Utility modules for ENSIP frontmatter validation.

This package contains shared helpers:
- frontmatter.py: Locating the fenced YAML block in Markdown text
- patterns.py: Identifier and date patterns used by the schema
"""

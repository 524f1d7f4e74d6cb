#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/versiondiff/utils/__init__.py
"""Utility modules for the versiondiff package.

Encoding detection for uploaded texts, optional-dependency checks and
timing helpers.
"""

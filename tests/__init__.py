"""
Test suite for docx_report project.

This module contains all unit tests for the docx_report package.
"""

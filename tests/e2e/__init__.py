"""End-to-end tests.

Purpose
- Drive the `product-catalog` CLI as a user would and assert on output and
  exit codes.
"""

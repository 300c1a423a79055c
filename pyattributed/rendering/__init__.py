"""Output adapters for attributed strings.

Contains:
- rich_text: conversion to and from ``rich.text.Text`` (the host rendering API)
- html_export: pure HTML fragment/page exporter
- options: HTML export flags
"""

#!/usr/bin/env python3
"""Thin compatibility entrypoint for the A2A dashboard."""

from __future__ import annotations

from a2a_tui.app import main


if __name__ == "__main__":
    raise SystemExit(main())

#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import argparse

from steamid.core.Enums import Format

FORMAT_CHOICES = [fmt.value for fmt in Format]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Steam ID converter")
    parser.add_argument("steam_id", type=str, help="Steam ID in any supported format")
    parser.add_argument("-f", "--format", type=str, choices=FORMAT_CHOICES, help="Output format (default from config)")
    parser.add_argument("-i", "--input-format", type=str, choices=FORMAT_CHOICES, help="Parse input with this format only")
    parser.add_argument("-a", "--all", action="store_true", help="Print every format and the decoded fields")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging output")
    parser.add_argument("-s", "--silent", action="store_true", help="Run silently (no logs)")
    return parser


def parse_args(argv=None):
    return build_parser().parse_args(argv)

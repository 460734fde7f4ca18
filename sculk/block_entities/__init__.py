"""Parsers that turn block entity compounds into dataclasses, grouped by kind."""
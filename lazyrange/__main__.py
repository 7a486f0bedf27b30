#!/usr/bin/env python3
# -*- coding: UTF-8 -*-
from lazyrange.cli import lazyrange_cli

if __name__ == "__main__":
    lazyrange_cli._parse_cli_args()

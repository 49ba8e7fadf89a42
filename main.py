#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import sys

from steamid.core.Enums import Format
from steamid.core.Errors import SteamIDError
from steamid.core.SteamID import SteamID
from steamid.utils.CliArgs import parse_args
from steamid.utils.ConfigLoader import ConfigLoader
from steamid.utils.Logger import Logger


def run(argv=None) -> int:
    config = ConfigLoader.get_config()
    args = parse_args(argv)

    if args.verbose:
        Logger.set_level("All")
    if args.silent:
        Logger.set_level("None")

    try:
        steam_id = SteamID.from_string(args.steam_id, args.input_format)
        Logger.debug(f"Decoded {args.steam_id!r}: {steam_id.fields()}")

        if args.all:
            for fmt in Format:
                try:
                    print(f"{fmt.value:<12} {steam_id.format(fmt)}")
                except SteamIDError as e:
                    Logger.warning(f"{fmt.value}: {e}")
            print(steam_id.fields())
        else:
            print(steam_id.format(args.format or config["default_format"]))
    except SteamIDError as e:
        Logger.error(str(e))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(run())

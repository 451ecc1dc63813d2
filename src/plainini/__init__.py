# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/12 21:36:02
# @Author : Kariko Lin

import logging

from .abstract import (
    IniError, IniFileNotFoundError, InvalidArgumentError, IniIOError
)
from .ini import (
    IniSection, IniDocument, IniFileParser, IniYamlParser, InvalidIniYaml,
    parse, dump
)

__all__ = [
    'IniSection', 'IniDocument', 'parse', 'dump',
    'IniFileParser', 'IniYamlParser', 'InvalidIniYaml',
    'IniError', 'IniFileNotFoundError', 'InvalidArgumentError', 'IniIOError'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')

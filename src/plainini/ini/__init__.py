# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/12 22:01:20
# @Author : Kariko Lin

from .escape import decode_value, encode_value
from .model import IniSection, IniDocument
from .parser import IniFileParser, dump, parse
from .yaml_io import IniYamlParser, InvalidIniYaml

# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/10 01:16:53
# @Author : Kariko Lin

from .model import IniDocument, IniSection, IniEntry, IniLine, IniBlock
from .parser import IniParser, parse
from .serializer import serialize
from .accessor import try_get, get, set_value, convert

from . import aff, dic

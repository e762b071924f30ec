from .domain import FrozenDomain, LoadFail, StrictLoad, load

import dataclasses

import dacite


FrozenDomain = dataclasses.dataclass(kw_only=True, slots=True, frozen=True)

load = dacite.from_dict

StrictLoad = dacite.Config(strict=True)

LoadFail = dacite.DaciteError

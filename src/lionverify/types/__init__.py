# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from ._sentinel import Absent, AbsentType, MaybeAbsent, is_absent

__all__ = ("Absent", "AbsentType", "MaybeAbsent", "is_absent")

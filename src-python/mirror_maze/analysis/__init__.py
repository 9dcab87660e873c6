"""
Copyright 2026 mirror-maze authors and contributors

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.

===============================================================================
Analysis Utilities
===============================================================================
Helpers that inspect and export solved light paths:

- Law-of-reflection checks and path length
- Text / XML descriptions
- CSV / JSON export
===============================================================================
"""

from .path_analysis import (
    BounceCheck,
    check_bounces,
    path_to_linestring,
    path_length,
    describe_ray_path,
)
from .saving import (
    save_path_csv,
    ray_path_to_dict,
    save_path_json,
)

__all__ = [
    'BounceCheck',
    'check_bounces',
    'path_to_linestring',
    'path_length',
    'describe_ray_path',
    'save_path_csv',
    'ray_path_to_dict',
    'save_path_json',
]

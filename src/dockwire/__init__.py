# Copyright 2024 Michael Maillet, Damien Davison, Sacha Davison
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


"""
dockwire - typed records and request options for a container engine HTTP API.

Decodes engine responses (containers, images, filesystem changes) into
immutable typed records and renders request options into query strings and
request bodies. Performs no network I/O itself.
"""
import logging

__version__ = "0.1.0"
__license__ = "Apache-2.0"

# Silent until the embedding application configures logging.
logging.getLogger(__name__).addHandler(logging.NullHandler())

# Copyright 2016 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Environment variables used by :mod:`google.api_client`."""


GOOGLE_API_METHOD_OVERRIDE = "GOOGLE_API_METHOD_OVERRIDE"
"""Environment variable listing the HTTP methods that should always be sent
as a ``POST`` with an ``X-HTTP-Method-Override`` header, for example
``"DELETE,PUT"``. Used by
:meth:`google.api_client.method_override.MethodOverride.from_environment`."""

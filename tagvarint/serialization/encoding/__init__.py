# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Integer encodings built on top of `Serializer`/`Deserializer`.

Each submodule deals with a single format and looks like this:

    def encode_x(serializer: Serializer, value: ValueType, ...config params...) -> int:
        ...

    def decode_x(deserializer: Deserializer, ...config params...) -> ValueType:
        ...

Encoders return how many bytes they wrote. The "config params" are optional, keyword-only and specific to each
encoder.
"""

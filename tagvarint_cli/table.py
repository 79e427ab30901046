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

from typing import Optional


def main(argv: Optional[list[str]] = None) -> int:
    from tagvarint.serialization.encoding.width_class import DEFAULT_WIDTH_CLASS_TABLE
    from tagvarint_cli.util import create_parser

    parser = create_parser()
    parser.add_argument('--json', action='store_true', help='Print the table as JSON')
    args = parser.parse_args(argv)

    if args.json:
        print(DEFAULT_WIDTH_CLASS_TABLE.json_dumpb().decode('utf-8'))
        return 0

    print('{:<8} {:>5} {:>8} {:>6} {:>12} {:>20}'.format('class', 'bytes', 'tag_size', 'tag', 'payload_bits',
                                                         'max_value'))
    for width_class in DEFAULT_WIDTH_CLASS_TABLE.classes:
        tag = format(width_class.tag_pattern, '0{}b'.format(width_class.tag_size))
        print('{:<8} {:>5} {:>8} {:>6} {:>12} {:>20}'.format(width_class.name, width_class.byte_capacity,
                                                             width_class.tag_size, tag, width_class.payload_bits,
                                                             width_class.max_value))
    return 0

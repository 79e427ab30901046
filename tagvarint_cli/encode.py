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

from structlog import get_logger

from tagvarint.utils.result import is_err

logger = get_logger()


def main(argv: Optional[list[str]] = None) -> int:
    from tagvarint.utils.tagged_varint import try_encode
    from tagvarint_cli.util import create_parser, parse_int

    parser = create_parser()
    parser.add_argument('values', nargs='+', type=parse_int, help='Values to encode (decimal, 0x-hex or 0b-binary)')
    parser.add_argument('--concat', action='store_true', help='Print all records as a single hex string')
    args = parser.parse_args(argv)

    records: list[bytes] = []
    for value in args.values:
        result = try_encode(value)
        if is_err(result):
            logger.error('cannot encode value', value=value, error=str(result.err()))
            print('error: {}'.format(result.err()))
            return 1
        record = result.unwrap()
        logger.debug('encoded value', value=value, size=len(record), record=record.hex())
        records.append(record)

    if args.concat:
        print(b''.join(records).hex())
    else:
        for record in records:
            print(record.hex())
    return 0

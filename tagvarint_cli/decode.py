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
    from tagvarint.utils.tagged_varint import try_decode
    from tagvarint_cli.util import create_parser, parse_hex

    parser = create_parser()
    parser.add_argument('data', type=parse_hex, help='Hex string with one or more consecutive records')
    args = parser.parse_args(argv)

    data: bytes = args.data
    offset = 0
    while data:
        result = try_decode(data)
        if is_err(result):
            logger.error('cannot decode record', offset=offset, error=str(result.err()))
            print('error at offset {}: {}'.format(offset, result.err()))
            return 1
        value, remaining = result.unwrap()
        logger.debug('decoded record', offset=offset, size=len(data) - len(remaining), value=value)
        print(value)
        offset += len(data) - len(remaining)
        data = remaining
    return 0

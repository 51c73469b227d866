# nopain

Small helpers for chores that come up in many projects: converting values
between text and numbers, padding strings, parsing and formatting dates,
Base64 and MD5, bcrypt password hashing, tokens, and working with files,
ZIP archives and downloads.

The only third-party dependency is `bcrypt`.

## Installation

```
pip install nopain
```

To run the test suite:

```
pip install "nopain[test]"
pytest
```

## Modules

| Module | What it offers |
| --- | --- |
| `nopain.calculations` | `percentage_of_value`, `value_from_percentage` |
| `nopain.collection_utils` | `contains_string` |
| `nopain.conversion` | Text, boolean, integer and float conversions with fixed-width range checks |
| `nopain.nullable` | Conversions where empty or invalid text becomes `None`, and `None` becomes `""` |
| `nopain.formatting` | `left_pad_with_char`, `right_pad_with_char`, `format_currency` |
| `nopain.timeformat` | Parsing, formatting, extracting and validating dates and times |
| `nopain.timecalc` | Calendar arithmetic, ends of periods, ages and "time ago" text |
| `nopain.encoding` | Base64 and MD5 helpers |
| `nopain.passwords` | `hash_password`, `check_password` (bcrypt, cost 10) |
| `nopain.tokens` | `generate_uuid`, `generate_random_token`, `generate_code` |
| `nopain.fileinfo` | File descriptions, directory listings, type and existence checks |
| `nopain.filemanager` | Creating, appending to, moving, copying and removing files and folders |
| `nopain.archive` | `zip_file_or_folder` |
| `nopain.downloader` | `Downloader`, `DownloadInfo`, `DownloadError` |

## Examples

### Conversions

```python
from nopain.conversion import any_to_string, float32_to_string, string_to_int, string_to_int8

any_to_string([1, 2, 3])      # "[1 2 3]"
any_to_string(None)           # "<nil>"
float32_to_string(123.45)     # "123.45"
string_to_int("123")          # 123
string_to_int("abc")          # raises ValueError
string_to_int8("300")         # raises ValueError (out of range)
```

Integer parsers accept only an optional sign and decimal digits, and check the
range of the named width (8, 32 or 64 bits). `float_to_int32` and friends
truncate toward zero and raise `OverflowError` when the result does not fit.
`string_to_bool` accepts `1, t, T, TRUE, true, True` and
`0, f, F, FALSE, false, False`.

```python
from nopain.nullable import string_to_int_or_none, int_or_none_to_string, format_time_optional

string_to_int_or_none("123")   # 123
string_to_int_or_none("")      # None
string_to_int_or_none("abc")   # None
int_or_none_to_string(None)    # ""
format_time_optional(None)     # None
```

### Padding and currency

```python
from nopain.formatting import left_pad_with_char, right_pad_with_char, format_currency

left_pad_with_char("123", 8, "0")      # "00000123"
right_pad_with_char("test", 12, "*")   # "test********"
format_currency(1234.56, "$")          # "$ 1234.56"
```

The padding functions return `""` when the value or the pad character is
empty or the length is not positive, and return the value unchanged when it
is already long enough.

### Dates and times

```python
from datetime import datetime
from nopain.timeformat import string_to_date, is_valid_date, extract_week, extract_milliseconds
from nopain.timecalc import add_months, last_day_of_month, time_ago

day = string_to_date("1994-01-01")       # midnight UTC
is_valid_date("2024-09-270")             # False
extract_week(datetime(2024, 9, 27))      # "39"
extract_milliseconds(datetime(2024, 9, 27, 12, 54, 9, 123000))  # "12:54:09.123"
add_months(datetime(2024, 1, 31), 1)     # 2 March 2024: day overflow rolls over
last_day_of_month(2024, 2)               # 2024-02-29 23:59:59.999999
time_ago(datetime(2014, 1, 19, 16, 20, 16))  # e.g. "10 years ago"
```

`string_to_date` and `string_to_datetime` return UTC datetimes and raise
`ValueError` for bad text. `current_date`, `current_datetime`, `current_year`,
`current_hour` (`HH:MM:SS`) and `current_time` (seconds only, `SS`) use the
local clock. `time_ago_between` combines two `time_ago` texts with the span
between them, e.g. `(72h3m0.5s)`.

### Encoding and hashing

```python
from nopain.encoding import encode_base64, decode_base64, encode_md5

encode_base64("This is the original String")
# "VGhpcyBpcyB0aGUgb3JpZ2luYWwgU3RyaW5n"
decode_base64("VGhpcyBpcyB0aGUgb3JpZ2luYWwgU3RyaW5n")
# "This is the original String"
encode_md5("Hello World")
# "b10a8db164e0754105b7a99be72e3fe5"
```

`decode_base64` and `decode_md5` raise `ValueError` for malformed input.
`decode_md5` only turns hexadecimal text back into bytes; it does not reverse
a hash.

```python
from nopain.passwords import hash_password, check_password

password = "password"
hashed = hash_password(password)
check_password(hashed, password)   # True
```

`hash_password` raises `ValueError` for passwords longer than 72 bytes.

### Tokens

```python
from nopain.tokens import generate_uuid, generate_random_token, generate_code

generate_uuid()               # 36-character version 4 UUID
generate_random_token(100)    # 136-character unpadded URL-safe Base64 token
generate_code("INV")          # "INV" followed by a 14-digit local timestamp
```

### Files and archives

```python
from nopain.filemanager import create_many_folders, create_single_file, write_file
from nopain.archive import zip_file_or_folder
from nopain.fileinfo import file_type, describe_file

create_many_folders("Documents/pdf")
create_single_file("Documents", "notes.txt")
write_file("Documents", "notes.txt", "Hello World")   # appends to an existing file
zip_file_or_folder("Documents", "Documents.zip")
file_type(".mp3")                                      # "Audio"
print(describe_file("Documents/notes.txt"))
```

The `filemanager` functions return `True` on success, raise `OSError` on
failure, and log creations and removals through the standard `logging`
module. `describe_file` and `list_files` return their report as text rather
than printing it. `zip_file_or_folder` deflates every entry and names it
relative to the folder that holds the source.

### Downloads

```python
from nopain.downloader import Downloader, DownloadError

try:
    info = Downloader().download_file("https://example.com/files/report.txt")
    print(info.file_name, info.size)
except DownloadError as exc:
    print("download failed:", exc)
```

The file is written to the current working directory under the last path
segment of the URL; `DownloadInfo.size` is in whole megabytes. Only `http://`
and `https://` URLs are accepted, and any status other than 200 raises
`DownloadError`.

## What it does not do

This is a library of functions only: it has no command-line program. It does
not handle HTTP uploads, sessions or middleware, does not generate PDF or
spreadsheet documents, and offers no database helpers.
import logging
from enum import Enum
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

# Keys ending with this text (just before their closing quote) have their values masked.
TARGET_SUFFIX = "_X"
# The character that replaces the body of a masked string.
REPLACE_CHAR = "*"
# The key text a target key must end with, including its closing quote.
QUOTED_TARGET_SUFFIX = TARGET_SUFFIX + '"'
UNSUPPORTED_VALUE_MESSAGE = "Only strings and arrays of strings are allowed as values."

class JsonMaskErrorKind(Enum):
    UNSUPPORTED_VALUE = 0
    UNTERMINATED_STRING = 1
    UNTERMINATED_ARRAY = 2
    UNEXPECTED_ARRAY_KEY = 3
    INVALID_ENCODING = 4
#end

class JsonMaskError(ValueError):
    kind: JsonMaskErrorKind
    message: str
    index: int

    def __init__(self, kind: JsonMaskErrorKind, message: str, index: int):
        super().__init__(f"{message} at {index}")
        self.kind = kind
        self.message = message
        self.index = index
    #end
#end

T = TypeVar("T")
E = TypeVar("E")

class JsonMaskResult(Generic[T, E]):
    is_error: bool
    value_or_none: T | None
    error_or_none: E | None

    def __init__(self, is_error: bool, value_or_none: T | None = None, error_or_none: E | None = None):
        self.is_error = is_error
        self.value_or_none = value_or_none
        self.error_or_none = error_or_none
    #end

    @staticmethod
    def from_value(value: T) -> "JsonMaskResult[T, E]":
        return JsonMaskResult(False, value_or_none=value)
    #end

    @staticmethod
    def from_error(error: E) -> "JsonMaskResult[T, E]":
        return JsonMaskResult(True, error_or_none=error)
    #end

    def value(self) -> T:
        if self.is_error:
            if isinstance(self.error_or_none, BaseException):
                raise self.error_or_none
            #end
            raise RuntimeError(f"Result was error: {self.error_or_none}")
        #end
        return self.value_or_none
    #end

    def error(self) -> E:
        if not self.is_error:
            raise RuntimeError(f"Result was value: {self.value_or_none!r}")
        #end
        return self.error_or_none
    #end

    def __repr__(self) -> str:
        if self.is_error:
            return f"error ({self.error_or_none!r})"
        #end
        return f"value ({self.value_or_none!r})"
    #end
#end

class JsonMaskReader:
    # The string to read characters from.
    string: str
    # The index in the string.
    index: int
    # The characters written so far.
    output: list[str]

    # Characters that end a run of filler.
    _FILLER_STOP_CHARS = set(['"', '['])

    def __init__(self, string: str) -> None:
        """
        Constructs a reader that masks target values in a string.
        """
        self.string = string
        self.index = 0
        self.output = []
    #end

    @staticmethod
    def mask_from_string(string: str) -> JsonMaskResult[str, JsonMaskError]:
        """
        Masks every value whose key ends with the target suffix.
        """
        return JsonMaskReader(string).mask()
    #end

    def mask(self) -> JsonMaskResult[str, JsonMaskError]:
        """
        Reads every key/value pair, copying the string with target values masked.
        Each call scans the whole string again from the start.
        """
        self.index = 0
        self.output = []
        try:
            self._read_pairs()
        except JsonMaskError as e:
            logger.debug("Rejected input: %s at %d", e.kind.name, e.index)
            return JsonMaskResult.from_error(e)
        #end
        return JsonMaskResult.from_value("".join(self.output))
    #end

    def _read_pairs(self) -> None:
        # Each iteration reads: filler "key" filler value filler
        while self._peek() != None:
            self._read_filler()
            # Input was only filler
            if self._peek() == None:
                return
            #end

            # Key
            if self._peek() == '[':
                raise self._err(JsonMaskErrorKind.UNEXPECTED_ARRAY_KEY, "Expected key, got array")
            #end
            key_start: int = self.index
            self._read_string()
            key: str = self.string[key_start:self.index]
            replace: bool = len(key) >= len(QUOTED_TARGET_SUFFIX) and key.endswith(QUOTED_TARGET_SUFFIX)

            # Separator
            self._read_filler()

            # Value
            self._read_value(replace)

            # Comma or closing brace
            self._read_filler()
        #end
    #end

    def _read_filler(self) -> None:
        start: int = self.index
        while self.index < len(self.string) and not (self.string[self.index] in self._FILLER_STOP_CHARS):
            self.index += 1
        #end
        if self.index > start:
            self.output.append(self.string[start:self.index])
        #end
    #end

    def _read_value(self, replace: bool) -> None:
        next: str | None = self._peek()

        # String
        if next == '"':
            self._read_string_or_mask(replace)
        # Array of strings
        elif next == '[':
            self._write(self._read())
            while True:
                next = self._peek()
                if next == None:
                    raise self._err(JsonMaskErrorKind.UNTERMINATED_ARRAY, "Expected ']' to end array")
                #end
                if next == ']':
                    break
                #end
                if next == '"':
                    self._read_string_or_mask(replace)
                else:
                    self._write(self._read())
                #end
            #end
            self._write(self._read())
        # Anything else
        else:
            raise self._err(JsonMaskErrorKind.UNSUPPORTED_VALUE, UNSUPPORTED_VALUE_MESSAGE)
        #end
    #end

    def _read_string_or_mask(self, replace: bool) -> None:
        if replace:
            self._read_and_mask_string()
        else:
            self._read_string()
        #end
    #end

    def _read_string(self) -> None:
        start: int = self.index
        self._skip_string_body()
        self.output.append(self.string[start:self.index])
    #end

    def _read_and_mask_string(self) -> None:
        # Empty strings are never masked
        if self._peek(1) == '"':
            self._write(self._read())
            self._write(self._read())
            return
        #end
        self._skip_string_body()
        self._write('"' + REPLACE_CHAR + '"')
    #end

    def _skip_string_body(self) -> None:
        """
        Moves past a quoted string, including both quotes.
        A backslash escapes exactly the next character.
        """
        string_start: int = self.index
        self._read()
        while True:
            next: str | None = self._read()
            if next == None:
                self.index = string_start
                raise self._err(JsonMaskErrorKind.UNTERMINATED_STRING, "Expected '\"' to end string")
            #end
            if next == '"':
                return
            #end
            if next == '\\':
                if self._read() == None:
                    self.index = string_start
                    raise self._err(JsonMaskErrorKind.UNTERMINATED_STRING, "Expected '\"' to end string")
                #end
            #end
        #end
    #end

    def _err(self, kind: JsonMaskErrorKind, message: str) -> JsonMaskError:
        return JsonMaskError(kind, message, self.index)
    #end

    def _write(self, chars: str) -> None:
        self.output.append(chars)
    #end

    def _peek(self, offset: int = 0) -> str | None:
        if self.index + offset >= len(self.string):
            return None
        #end
        next: str = self.string[self.index + offset]
        return next
    #end

    def _read(self) -> str | None:
        if self.index >= len(self.string):
            return None
        #end
        next: str = self.string[self.index]
        self.index += 1
        return next
    #end
#end

def mask_target_values(string: str) -> JsonMaskResult[str, JsonMaskError]:
    """
    Returns a copy of a flat JSON-like string where the value of each key ending with
    TARGET_SUFFIX is masked: "value" becomes "*" and ["a", "b"] becomes ["*", "*"].
    Only strings and arrays of strings are supported as values.
    """
    if not isinstance(string, str):
        raise TypeError(f"Expected str, got {type(string).__name__}")
    #end
    return JsonMaskReader.mask_from_string(string)
#end

def mask_target_values_from_bytes(data: bytes) -> JsonMaskResult[bytes, JsonMaskError]:
    """
    Same as mask_target_values, for UTF-8 encoded bytes.
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"Expected bytes, got {type(data).__name__}")
    #end
    try:
        string: str = bytes(data).decode("utf-8")
    except UnicodeDecodeError as e:
        logger.debug("Rejected input: %s at %d", JsonMaskErrorKind.INVALID_ENCODING.name, e.start)
        return JsonMaskResult.from_error(JsonMaskError(JsonMaskErrorKind.INVALID_ENCODING, "Invalid UTF-8", e.start))
    #end
    result: JsonMaskResult[str, JsonMaskError] = mask_target_values(string)
    if result.is_error:
        return JsonMaskResult.from_error(result.error())
    #end
    return JsonMaskResult.from_value(result.value().encode("utf-8"))
#end

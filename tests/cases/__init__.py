from .decoding import DecodingTestCase  # noqa: F401

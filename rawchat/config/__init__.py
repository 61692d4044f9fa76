from .settings import CodecSettings, get_codec_settings  # noqa: F401

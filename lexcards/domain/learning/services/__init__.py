from .content_codec import ContentCodec

__all__ = ["ContentCodec"]

"""Gateways: file decoders implementing the ConfigDecoder port."""

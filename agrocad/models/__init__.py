from .producer import Producer, ProducerForm

__all__ = [
    "Producer",
    "ProducerForm",
]

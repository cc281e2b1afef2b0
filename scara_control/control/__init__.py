"""
Motor-side control: frame translation, step quantization, wire format,
transport/presenter interfaces, and the high-level arm controller.
"""

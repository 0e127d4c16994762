"""toyrobot — a toy robot simulator on a bounded, wrapping grid."""

__version__ = "0.1.0"

from themecss.emit.base import CustomPropertyEmitter
from themecss.emit.custom_properties import VarEmitter
from themecss.emit.feature import COLOR, FeatureQuery

__all__ = ["COLOR", "CustomPropertyEmitter", "FeatureQuery", "VarEmitter"]

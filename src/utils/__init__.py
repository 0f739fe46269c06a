"""
Utility modules for the checkout gateway
"""
from .config_loader import GatewayConfig, load_gateway_config, normalize_port

__all__ = [
    'GatewayConfig',
    'load_gateway_config',
    'normalize_port',
]

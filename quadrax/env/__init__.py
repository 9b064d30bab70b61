from .quadrax_env import NUM_ACTIONS, QuadraXEnv, decode_action, encode_action

__all__ = ["QuadraXEnv", "NUM_ACTIONS", "encode_action", "decode_action"]

from .statement import Condition, Kind, Statement, block, call, if_, if_else, while_

__all__ = ['Condition', 'Kind', 'Statement', 'block', 'call', 'if_', 'if_else', 'while_']

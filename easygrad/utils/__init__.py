from easygrad.utils.draw_utils import trace, draw_dot, plot_losses

__all__ = ['trace', 'draw_dot', 'plot_losses']

"""
Unified Color Mapping System
Light theme only - one palette shared by every chart
"""


def get_unified_color_schemes():
    """
    Unified color schemes for light theme only

    Returns:
        dict: Plot styling colors, trace colors and marker colors
    """

    # Pie slices cycle through these four
    pie_colors = ['#3b82f6', '#ef4444', '#f59e0b', '#22c55e']

    return {
        # Plot styling colors
        'background': 'white',
        'paper': 'white',
        'text': '#1f2937',
        'grid': '#e6e6e6',
        'font_family': 'Inter, sans-serif',

        # Trace colors
        'point_color': '#3b82f6',
        'line_color': '#3b82f6',
        'pie_colors': pie_colors,
        'heatmap_colorscale': 'Blues',

        # Skewness markers
        'normal_curve': '#f59e0b',
        'mean_marker': '#22c55e',
        'median_marker': '#ef4444',
        'mode_marker': '#6366f1',

        # Theme identifier
        'theme': 'light'
    }


def with_opacity(hex_color, opacity):
    """
    Convert '#rrggbb' to an rgba() string

    Args:
        hex_color (str): Hex color with leading '#'
        opacity (float): Alpha between 0 and 1

    Returns:
        str: 'rgba(r, g, b, a)'
    """
    hex_color = hex_color.lstrip('#')
    r, g, b = (int(hex_color[i:i + 2], 16) for i in (0, 2, 4))
    return f'rgba({r}, {g}, {b}, {opacity})'

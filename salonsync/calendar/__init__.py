"""
Calendar rendering: day layout, month heatmap, dashboard helpers
"""

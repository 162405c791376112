"""
Qt desktop shell - window dimension source, QML layout bridge and card model.
"""

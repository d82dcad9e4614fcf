from sensorlink.parsing.points.extract import extract_points

__all__ = ["extract_points"]

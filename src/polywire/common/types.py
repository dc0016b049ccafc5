"""
どこで: `polywire.common` の型定義。
何を: Edge/Face/Color などの軽量エイリアス（組込みジェネリックで記述）。
なぜ: 依存の少ない場所に配置して循環と分散定義を避けるため。
"""

# 頂点 index の無向ペア
Edge = tuple[int, int]
# 3 頂点以上の index 列
Face = tuple[int, ...]

# "#RRGGBB" / "#RRGGBBAA" 形式の色文字列
Color = str
RGBA = tuple[float, float, float, float]


__all__ = ["Edge", "Face", "Color", "RGBA"]

"""
どこで: `polywire.engine` パッケージ。
何を: 計算基盤（core）と描画（render）のサブパッケージをまとめる。
"""

"""
どこで: `polywire.common` サブパッケージ。
何を: ロギング初期化・環境変数設定・型エイリアス・名前レジストリの共通基盤。
なぜ: 依存の少ない層に横断的関心事を集約し、上位層からの循環 import を避けるため。
"""

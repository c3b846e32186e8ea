"""
服務層

這個 package 包含純計算邏輯，不負責狀態和鎖：
- BoardGenerator：用可重現的亂數產生隨機棋盤
- MoveParser：把 URL 上的玩家代號和欄位轉成內部型別
"""

"""
核心業務邏輯層

這個 package 包含所有核心業務邏輯，包括：
- Board：4x4 Connect Four 棋盤規則（純邏輯，無 I/O）
- GameSession：唯一的共享遊戲狀態（棋盤 + RNG）
- Locks：並發控制工具（讀寫鎖）
- Exceptions：業務邏輯異常
"""

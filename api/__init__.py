"""
API 層

這個 package 只負責 HTTP <-> 業務邏輯的轉換：
- connect4：棋盤查詢、下棋、重置、隨機棋盤
"""

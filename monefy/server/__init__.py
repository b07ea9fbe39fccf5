"""SQLite record store and HTTP application for the expense tracker."""
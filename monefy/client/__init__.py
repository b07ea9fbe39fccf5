"""HTTP API client and interactive console for the expense tracker."""
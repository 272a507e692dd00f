CSS_LOG = """
/* Base styles */
.content {
    font-family: monospace;
    padding: 1em;
}

.section h3 {
    border-bottom: 1px solid #3a4a6d;
}

.warning {
    color: #d08a00;
}

.error {
    color: #ff8080;
}

.result strong {
    color: #4a90e2;
}

/* Layout tables */
.table-container table {
    border-collapse: collapse;
}

.table-container td,
.table-container th {
    padding: 4px 12px;
    white-space: nowrap;
}
"""

"""
ERP Domain - Message envelope and publisher port.

Bidirectional synchronization with the external ERP system:
- Outbound domain-event envelopes
- The port through which envelopes leave the system
"""

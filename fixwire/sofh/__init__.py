"""Simple Open Framing Header (SOFH) support: encoding types, frames and stream decoding."""